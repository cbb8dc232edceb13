"""
Core Engine for Fantasy Quest.

The engine orchestrates:
- Scenario resolution (choices and battles)
- The run loop (scenario order, early death, final outcome)
- Narration and input through injected collaborators
"""

from __future__ import annotations

from src.engine.game import GameEngine
from src.engine.models import GameConfig
from src.engine.narration import (
    InputSource,
    Narrator,
    RecordingNarrator,
    ScriptedInput,
    parse_selection,
)
from src.engine.scenarios import play_battle, play_choice, play_scenario

__all__ = [
    # Main engine
    "GameEngine",
    "GameConfig",
    # Scenarios
    "play_choice",
    "play_battle",
    "play_scenario",
    # Narration
    "Narrator",
    "InputSource",
    "RecordingNarrator",
    "ScriptedInput",
    "parse_selection",
]
