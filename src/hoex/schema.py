"""Request and result models for the module scaffolder."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidKindError, InvalidNameError, MissingArgumentError
from .naming import sanitize_package_name

DEFAULT_DESCRIPTION = "A Rust {kind} for learning"


class ModuleKind(str, Enum):
    """Categories of generated modules."""

    EXAMPLE = "example"
    EXERCISE = "exercise"
    PROJECT = "project"

    @property
    def directory(self) -> str:
        """Name of the workspace directory holding modules of this kind."""

        return f"{self.value}s"

    @classmethod
    def parse(cls, value: "str | ModuleKind") -> "ModuleKind":
        """Return the kind spelled exactly as ``value`` or raise :class:`InvalidKindError`."""

        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise InvalidKindError(str(value))


class GenerationStatus(str, Enum):
    """Outcome of a generation request."""

    CREATED = "created"
    CANCELLED = "cancelled"


class CheckStatus(str, Enum):
    """Outcome of the advisory build check."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class ModuleRequest(BaseModel):
    """Validated description of the module to generate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ModuleKind = Field(..., description="Category of the module.")
    raw_name: str = Field(..., min_length=1, description="Directory name exactly as typed by the user.")
    description: str = Field(..., description="One line summary rendered into every generated file.")

    @classmethod
    def build(
        cls,
        kind: "str | ModuleKind | None",
        raw_name: str | None,
        description: str | None = None,
    ) -> "ModuleRequest":
        """Validate raw command line values and build a request.

        Raises
        ------
        MissingArgumentError
            ``kind`` or ``raw_name`` is absent or blank.
        InvalidKindError
            ``kind`` is not one of the recognised module kinds.
        InvalidNameError
            ``raw_name`` would not produce a single directory below the
            kind's directory.
        """

        if kind is None or not str(getattr(kind, "value", kind)).strip():
            raise MissingArgumentError("Missing required argument: <type>")
        if raw_name is None or not raw_name.strip():
            raise MissingArgumentError("Missing required argument: <name>")

        module_kind = ModuleKind.parse(kind)

        if "/" in raw_name or "\\" in raw_name or raw_name.strip() in {".", ".."}:
            raise InvalidNameError(
                f"Invalid name '{raw_name}': the name must be a single directory name"
            )

        summary = description or DEFAULT_DESCRIPTION.format(kind=module_kind.value)

        return cls(kind=module_kind, raw_name=raw_name, description=summary)

    @property
    def package_name(self) -> str:
        """Cargo package and binary name derived from :attr:`raw_name`."""

        return sanitize_package_name(self.raw_name, self.kind)

    @property
    def relative_path(self) -> PurePosixPath:
        """Location of the module relative to the workspace root."""

        return PurePosixPath(self.kind.directory, self.raw_name)


class GenerationResult(BaseModel):
    """Summary of a finished generation request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    request: ModuleRequest = Field(..., description="Request that produced this result.")
    status: GenerationStatus = Field(..., description="Whether the module was written or the user cancelled.")
    path: str = Field(..., description="Absolute path of the module directory.")
    files: List[str] = Field(default_factory=list, description="Relative POSIX paths written, in write order.")
    check: CheckStatus = Field(default=CheckStatus.SKIPPED, description="Outcome of the advisory build check.")
    replaced: bool = Field(default=False, description="True when an existing directory was overwritten.")

    @property
    def ok(self) -> bool:
        """False only when files were written but the advisory check failed."""

        return self.check is not CheckStatus.FAILED


__all__ = [
    "CheckStatus",
    "DEFAULT_DESCRIPTION",
    "GenerationResult",
    "GenerationStatus",
    "ModuleKind",
    "ModuleRequest",
]
