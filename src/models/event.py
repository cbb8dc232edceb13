"""
Run Event Models for Fantasy Quest.

Everything the game has to say to the player is expressed as a RunEvent.
The core never formats terminal output itself; a Narrator decides how an
event looks (color, pacing) based on its emphasis.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Emphasis(str, Enum):
    """Abstract style of a line of narration."""

    INFO = "info"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class EventType(str, Enum):
    """Categories of narration emitted during a run."""

    # Framing
    BANNER = "banner"
    PROMPT = "prompt"
    WELCOME = "welcome"
    INTRODUCTION = "introduction"

    # Choice scenarios
    DESCRIPTION = "description"
    OPTION = "option"
    RESULT = "result"
    INVALID_CHOICE = "invalid_choice"

    # Battle scenarios
    ENCOUNTER = "encounter"
    ACTION_MENU = "action_menu"
    ATTACK = "attack"
    HEAL = "heal"
    DEFEATED = "defeated"
    HEALTH_STATUS = "health_status"
    BATTLE_WON = "battle_won"
    BATTLE_LOST = "battle_lost"

    # Run outcome
    EPILOGUE = "epilogue"
    GAME_OVER = "game_over"


class RunEvent(BaseModel):
    """A single line of narration."""

    type: EventType
    text: str
    emphasis: Emphasis = Emphasis.NEUTRAL
    paced: bool = Field(default=True, description="Render with the slow-print effect")


def create_event(
    event_type: EventType,
    text: str,
    emphasis: Emphasis = Emphasis.NEUTRAL,
    paced: bool = True,
) -> RunEvent:
    """Factory function to create a run event."""
    return RunEvent(type=event_type, text=text, emphasis=emphasis, paced=paced)
