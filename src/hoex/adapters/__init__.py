"""Concrete runner and confirmer implementations."""

from .console import AssumeYesConfirmer, ConsoleConfirmer
from .process import COMMAND_NOT_FOUND, SubprocessRunner

__all__ = [
    "AssumeYesConfirmer",
    "COMMAND_NOT_FOUND",
    "ConsoleConfirmer",
    "SubprocessRunner",
]
