"""Custom exception types raised by the module scaffolder."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Raised when a module request cannot be fulfilled."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MissingArgumentError(ScaffoldError):
    """Raised when a required positional argument is absent or blank."""


class InvalidKindError(ScaffoldError):
    """Raised for a module kind other than example, exercise or project."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Invalid type '{kind}'. Valid types: example, exercise, project"
        )
        self.kind = kind


class InvalidNameError(ScaffoldError):
    """Raised when a module name is not a single directory name."""


class NotWorkspaceRootError(ScaffoldError):
    """Raised when the working directory lacks the workspace markers."""


__all__ = [
    "InvalidKindError",
    "InvalidNameError",
    "MissingArgumentError",
    "NotWorkspaceRootError",
    "ScaffoldError",
]
