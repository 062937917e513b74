"""Lightweight string templating utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "escape_rust_string",
    "escape_toml_string",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def escape_toml_string(value: Any) -> str:
    """Escape ``value`` for use inside a double quoted TOML basic string."""

    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return text.replace("\n", "\\n").replace("\t", "\\t")


def escape_rust_string(value: Any) -> str:
    """Escape ``value`` for a Rust string literal passed to ``format!``-style macros."""

    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    text = text.replace("{", "{{").replace("}", "}}")
    return text.replace("\n", "\\n")


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Every placeholder must resolve: an unknown key or filter raises
    :class:`TemplateRenderingError`.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update({"toml": escape_toml_string, "rust": escape_rust_string})

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key, *filters = [part.strip() for part in match.group("expression").split("|")]
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for filter_name in filters:
                if filter_name not in self.filters:
                    raise TemplateRenderingError(f"unknown filter '{filter_name}'")
                value = self.filters[filter_name](value)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
