"""Terminal confirmers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..interfaces import Confirmer


class ConsoleConfirmer(Confirmer):
    """Ask on the terminal with a ``(y/N)`` suffix.

    An answer starting with ``y`` or ``Y`` accepts; anything else, including
    an empty line or a closed stdin, declines.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def confirm(self, prompt: str) -> bool:
        try:
            answer = Prompt.ask(
                f"{escape(prompt)} (y/N)",
                console=self._console,
                default="",
                show_default=False,
            )
        except EOFError:
            return False
        return answer.strip()[:1] in {"y", "Y"}


class AssumeYesConfirmer(Confirmer):
    """Accept every prompt without asking (``--yes``)."""

    def confirm(self, prompt: str) -> bool:
        return True
