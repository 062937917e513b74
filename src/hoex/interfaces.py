"""Abstract interfaces for the scaffolder's interactive and process boundaries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence


class Runner(ABC):
    """Executes an external command and reports its exit status."""

    @abstractmethod
    def run(self, command: str, args: Sequence[str], working_dir: Path) -> int:
        """Run ``command`` with ``args`` inside ``working_dir`` and return the exit code."""


class Confirmer(ABC):
    """Asks the user a yes/no question."""

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Return ``True`` when the user accepts ``prompt``."""


__all__ = ["Confirmer", "Runner"]
