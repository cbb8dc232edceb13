"""
Narration interfaces for Fantasy Quest.

Uses Protocol classes to define the contract for everything the game says
and everything it asks. The engine depends only on these protocols; the
console implementations live in src.cli, and the in-memory ones here are
used for tests and scripted runs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from src.models.event import RunEvent


class Narrator(Protocol):
    """Renders narration events to the player."""

    def narrate(self, event: RunEvent) -> None:
        """Render a single event."""
        ...


class InputSource(Protocol):
    """Supplies player responses."""

    def read_selection(self, prompt: str = "> ") -> int | None:
        """
        Read a numbered selection.

        Returns:
            The number typed, or None for blank, non-numeric or absent input
        """
        ...

    def read_line(self, prompt: str = "> ") -> str:
        """Read a line of free text. Returns an empty string when absent."""
        ...


def parse_selection(raw: str | int | None) -> int | None:
    """
    Interpret a raw response as a menu selection.

    Only the first whitespace-separated token is read, and it must be a
    whole integer. Unlike stream extraction, a token with trailing junk
    ("1abc", "1.5") is rejected rather than read as its numeric prefix.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    text = raw.strip()
    if not text:
        return None
    token = text.split()[0]
    try:
        return int(token)
    except ValueError:
        return None


class RecordingNarrator:
    """Narrator that keeps every event in memory."""

    def __init__(self) -> None:
        self.events: list[RunEvent] = []

    def narrate(self, event: RunEvent) -> None:
        self.events.append(event)

    @property
    def lines(self) -> list[str]:
        """Text of every recorded event, in order."""
        return [event.text for event in self.events]


class ScriptedInput:
    """
    Input source that replays a fixed list of responses.

    Once the script runs out every read behaves like end of input.
    """

    def __init__(self, responses: Iterable[str | int]) -> None:
        self._responses = list(responses)
        self._position = 0
        self.prompts: list[str] = []

    def _next(self, prompt: str) -> str | int | None:
        self.prompts.append(prompt)
        if self._position >= len(self._responses):
            return None
        response = self._responses[self._position]
        self._position += 1
        return response

    @property
    def remaining(self) -> int:
        """Responses not yet consumed."""
        return len(self._responses) - self._position

    def read_selection(self, prompt: str = "> ") -> int | None:
        return parse_selection(self._next(prompt))

    def read_line(self, prompt: str = "> ") -> str:
        response = self._next(prompt)
        return "" if response is None else str(response).strip()
