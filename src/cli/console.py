"""
Terminal narration for Fantasy Quest.

Renders run events with rich styles and the slow, character-by-character
print effect, and reads the player's answers from the terminal.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.console import Console

from src.engine.narration import parse_selection
from src.models.event import Emphasis, RunEvent

EMPHASIS_STYLES: dict[Emphasis, str] = {
    Emphasis.INFO: "cyan",
    Emphasis.POSITIVE: "green",
    Emphasis.NEGATIVE: "red",
    Emphasis.NEUTRAL: "white",
}


class ConsoleNarrator:
    """Narrator that prints to a rich Console."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        text_delay_ms: int = 50,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.text_delay_ms = text_delay_ms
        self._sleep = sleep

    def narrate(self, event: RunEvent) -> None:
        style = EMPHASIS_STYLES[event.emphasis]
        if not event.paced or self.text_delay_ms <= 0:
            self.console.print(
                event.text, style=style, markup=False, highlight=False, soft_wrap=True
            )
            return

        delay = self.text_delay_ms / 1000
        for char in event.text:
            self.console.print(
                char, style=style, end="", markup=False, highlight=False, soft_wrap=True
            )
            self.console.file.flush()
            self._sleep(delay)
        self.console.print()


class ConsoleInput:
    """
    Input source that reads from the terminal.

    End of input and undecodable bytes both read as absent.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def _read(self, prompt: str) -> str | None:
        try:
            return self.console.input(prompt)
        except (EOFError, UnicodeDecodeError):
            return None

    def read_selection(self, prompt: str = "> ") -> int | None:
        return parse_selection(self._read(prompt))

    def read_line(self, prompt: str = "> ") -> str:
        return (self._read(prompt) or "").strip()
