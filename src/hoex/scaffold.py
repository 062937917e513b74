"""Module scaffolding: validation, staged writes and the advisory build check."""

from __future__ import annotations

import logging
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import WorkspaceConfig
from .interfaces import Confirmer, Runner
from .module_files import render_module_files
from .naming import display_kind
from .schema import CheckStatus, GenerationResult, GenerationStatus, ModuleKind, ModuleRequest

__all__ = ["ModuleScaffolder", "ProgressCallback"]

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def _ignore_progress(message: str) -> None:
    return None


@dataclass(slots=True)
class ModuleScaffolder:
    """Create example, exercise and project modules inside a workspace.

    The scaffolder never reads the environment: the workspace root, the
    overwrite prompt and the build-check process are all injected, which
    keeps :meth:`generate` deterministic under test.
    """

    config: WorkspaceConfig
    confirmer: Confirmer
    runner: Runner
    progress: ProgressCallback = field(default=_ignore_progress)

    def generate(
        self,
        kind: str | ModuleKind | None,
        raw_name: str | None,
        description: str | None = None,
        *,
        run_check: bool = True,
    ) -> GenerationResult:
        """Generate the module described by ``kind``, ``raw_name`` and ``description``.

        Validation errors are raised as :class:`~hoex.errors.ScaffoldError`
        subclasses before anything is written. Declining the overwrite prompt
        returns a ``CANCELLED`` result and leaves the filesystem untouched. A
        failing build check is reported through :attr:`GenerationResult.check`
        and never removes the written files.
        """

        request = ModuleRequest.build(kind, raw_name, description)
        return self.create(request, run_check=run_check)

    def create(self, request: ModuleRequest, *, run_check: bool = True) -> GenerationResult:
        """Generate the module for an already validated ``request``."""

        target = self.config.module_path(request)
        replaced = False

        if target.exists():
            prompt = f"Directory '{request.relative_path}' already exists. Overwrite it?"
            if not self.confirmer.confirm(prompt):
                LOGGER.info("overwrite of %s declined", target)
                return GenerationResult(
                    request=request,
                    status=GenerationStatus.CANCELLED,
                    path=str(target),
                )
            replaced = True

        self.progress(f"Creating {display_kind(request.kind)}: {request.raw_name}")
        self.progress("Creating directory structure...")
        files = self._write_module(request, target, replace=replaced)

        check = CheckStatus.SKIPPED
        if run_check:
            check = self._check(target)

        return GenerationResult(
            request=request,
            status=GenerationStatus.CREATED,
            path=str(target),
            files=files,
            check=check,
            replaced=replaced,
        )

    def _write_module(self, request: ModuleRequest, target: Path, *, replace: bool) -> list[str]:
        target.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{target.name}-", dir=target.parent))
        backup: Path | None = None
        written: list[str] = []

        try:
            staging.chmod(0o755)
            (staging / "src").mkdir()
            for relative_path, text in render_module_files(request):
                self.progress(f"Creating {relative_path}...")
                destination = staging / relative_path
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(text, encoding="utf-8")
                written.append(relative_path)

            if replace and target.exists():
                self.progress("Removing existing directory...")
                backup = target.with_name(f"{staging.name}.old")
                target.rename(backup)
            staging.rename(target)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            if backup is not None and not target.exists():
                backup.rename(target)
            raise

        if backup is not None:
            LOGGER.info("removing previous contents of %s", target)
            if backup.is_dir() and not backup.is_symlink():
                shutil.rmtree(backup)
            else:
                backup.unlink()

        LOGGER.debug("wrote %d files to %s", len(written), target)
        return written

    def _check(self, target: Path) -> CheckStatus:
        command, *args = self.config.check_command
        self.progress("Checking that the new module compiles...")
        exit_code = self.runner.run(command, args, target)
        if exit_code == 0:
            return CheckStatus.PASSED
        LOGGER.warning("advisory check %s exited with %s", " ".join(self.config.check_command), exit_code)
        return CheckStatus.FAILED
