"""Generate boilerplate modules for a Rust learning workspace.

The package turns a module kind (example, exercise or project), a directory
name and an optional description into a Cargo package with a manifest, a
source stub, a README outline and an integration test, then runs an
advisory ``cargo check`` against it. Everything is usable both
programmatically and via the ``hoex`` command line interface.
"""

from __future__ import annotations

from .config import WorkspaceConfig
from .errors import (
    InvalidKindError,
    InvalidNameError,
    MissingArgumentError,
    NotWorkspaceRootError,
    ScaffoldError,
)
from .interfaces import Confirmer, Runner
from .naming import sanitize_package_name
from .scaffold import ModuleScaffolder
from .schema import CheckStatus, GenerationResult, GenerationStatus, ModuleKind, ModuleRequest
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CheckStatus",
    "Confirmer",
    "GenerationResult",
    "GenerationStatus",
    "InvalidKindError",
    "InvalidNameError",
    "MissingArgumentError",
    "ModuleKind",
    "ModuleRequest",
    "ModuleScaffolder",
    "NotWorkspaceRootError",
    "Runner",
    "ScaffoldError",
    "TemplateRenderer",
    "TemplateRenderingError",
    "WorkspaceConfig",
    "sanitize_package_name",
]

__version__ = "0.1.0"
