"""Workspace configuration shared by the scaffolder and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .errors import NotWorkspaceRootError
from .schema import ModuleRequest

LOGGER = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAMES: tuple[str, ...] = ("Cargo.toml", "cargo.toml")
DEFAULT_MARKER_DIRS: tuple[str, ...] = ("examples", "utils")
DEFAULT_CHECK_COMMAND: tuple[str, ...] = ("cargo", "check", "--quiet")


def is_workspace_root(
    path: Path,
    *,
    manifest_names: Sequence[str] = DEFAULT_MANIFEST_NAMES,
    marker_dirs: Sequence[str] = DEFAULT_MARKER_DIRS,
) -> bool:
    """Return ``True`` when ``path`` holds a root manifest and every marker directory."""

    has_manifest = any((path / name).is_file() for name in manifest_names)
    return has_manifest and all((path / name).is_dir() for name in marker_dirs)


@dataclass(frozen=True, slots=True)
class WorkspaceConfig:
    """Settings resolved once at startup and passed to the scaffolder.

    Attributes
    ----------
    root:
        Absolute path of the learning workspace. Every generated module is
        created below this directory.
    manifest_names:
        File names accepted as the workspace manifest. One of them must exist
        in :attr:`root`.
    marker_dirs:
        Directories that must exist in :attr:`root` for it to be recognised
        as the workspace.
    check_command:
        Command (program followed by its arguments) executed inside a newly
        generated module to verify that it compiles.
    """

    root: Path
    manifest_names: tuple[str, ...] = DEFAULT_MANIFEST_NAMES
    marker_dirs: tuple[str, ...] = DEFAULT_MARKER_DIRS
    check_command: tuple[str, ...] = DEFAULT_CHECK_COMMAND

    @classmethod
    def discover(
        cls,
        cwd: str | Path | None = None,
        *,
        check_command: Sequence[str] | None = None,
        manifest_names: Sequence[str] = DEFAULT_MANIFEST_NAMES,
        marker_dirs: Sequence[str] = DEFAULT_MARKER_DIRS,
    ) -> "WorkspaceConfig":
        """Build a :class:`WorkspaceConfig` for ``cwd`` (defaults to the current directory).

        Raises
        ------
        NotWorkspaceRootError
            When ``cwd`` lacks the workspace manifest or a marker directory.
        """

        root = Path(cwd if cwd is not None else Path.cwd()).expanduser().resolve()
        config = cls(
            root=root,
            manifest_names=tuple(manifest_names),
            marker_dirs=tuple(marker_dirs),
            check_command=tuple(check_command) if check_command else DEFAULT_CHECK_COMMAND,
        )

        if not is_workspace_root(
            root, manifest_names=config.manifest_names, marker_dirs=config.marker_dirs
        ):
            manifests = " or ".join(config.manifest_names)
            markers = ", ".join(f"{name}/" for name in config.marker_dirs)
            raise NotWorkspaceRootError(
                "This command must be run from the repository root directory\n"
                f"Current directory: {root}\n"
                f"Looking for: {manifests}, {markers}"
            )

        LOGGER.debug("workspace root resolved to %s", root)
        return config

    def module_path(self, request: ModuleRequest) -> Path:
        """Return the absolute directory that ``request`` generates."""

        return self.root.joinpath(*request.relative_path.parts)
