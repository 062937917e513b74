"""String normalisation utilities used when generating Cargo packages."""

from __future__ import annotations

import re
from enum import Enum

__all__ = ["display_kind", "sanitize_package_name"]


_SEPARATORS = re.compile(r"[\s\-.]")
_INVALID_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]")
_LEADING_PREFIX = re.compile(r"^[0-9_]+")


def _kind_value(kind: str | Enum) -> str:
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


def sanitize_package_name(raw_name: str, kind: str | Enum) -> str:
    """Return a valid Cargo package identifier derived from ``raw_name``.

    Separators become underscores, anything outside ``[A-Za-z0-9_]`` is
    dropped, the leading run of digits and underscores (the ordering prefix
    of names such as ``01-helloWorld``) is stripped and the result is
    lowercased. When nothing survives, ``"<kind>_example"`` is returned.

    >>> sanitize_package_name("01-helloWorld", "example")
    'helloworld'
    >>> sanitize_package_name("---", "project")
    'project_example'
    """

    candidate = _SEPARATORS.sub("_", raw_name)
    candidate = _INVALID_IDENTIFIER.sub("", candidate)
    candidate = _LEADING_PREFIX.sub("", candidate)
    candidate = candidate.lower()

    if not candidate:
        candidate = f"{_kind_value(kind)}_example"

    return candidate


def display_kind(kind: str | Enum) -> str:
    """Return the capitalised label for ``kind`` (``"exercise"`` -> ``"Exercise"``)."""

    value = _kind_value(kind)
    return value[:1].upper() + value[1:]
