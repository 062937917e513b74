"""Run external toolchain commands with :mod:`subprocess`."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from ..interfaces import Runner

LOGGER = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class SubprocessRunner(Runner):
    """Run commands synchronously, inheriting the parent's stdout and stderr.

    There is no timeout; the call blocks until the child exits. A program
    that cannot be started is reported as exit code ``127``.
    """

    def run(self, command: str, args: Sequence[str], working_dir: Path) -> int:
        argv = [command, *args]
        LOGGER.debug("running %s in %s", " ".join(argv), working_dir)
        try:
            completed = subprocess.run(argv, cwd=str(working_dir), check=False)
        except FileNotFoundError:
            LOGGER.warning("command not found: %s", command)
            return COMMAND_NOT_FOUND
        except OSError as exc:
            LOGGER.warning("failed to execute %s: %s", command, exc)
            return COMMAND_NOT_FOUND

        LOGGER.debug("%s exited with %s", command, completed.returncode)
        return completed.returncode
