"""
Engine Data Models for Fantasy Quest.

Defines the configuration the run driver and scenarios are tuned by.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

ENV_PREFIX = "FANTASY_QUEST_"


class GameConfig(BaseModel):
    """Game configuration."""

    # Player
    default_player_name: str = Field(default="Hero", min_length=1)
    starting_health: int = Field(default=100, gt=0)
    starting_attack_power: int = Field(default=20, gt=0)

    # Battle
    heal_amount: int = Field(default=10, ge=0, description="Health restored by the Heal action")

    # Presentation
    text_delay_ms: int = Field(default=50, ge=0, description="Slow-print delay per character")

    @classmethod
    def from_env(cls, **overrides: object) -> GameConfig:
        """
        Build a config from FANTASY_QUEST_* environment variables.

        Explicit keyword overrides win over the environment, which wins
        over the defaults. Overrides set to None are ignored.

        Environment variables:
            FANTASY_QUEST_PLAYER_NAME: Default name when none is entered
            FANTASY_QUEST_STARTING_HEALTH: Player starting health
            FANTASY_QUEST_STARTING_ATTACK_POWER: Player attack power
            FANTASY_QUEST_HEAL_AMOUNT: Health restored by Heal
            FANTASY_QUEST_TEXT_DELAY_MS: Slow-print delay per character
        """
        env_fields = {
            "default_player_name": "PLAYER_NAME",
            "starting_health": "STARTING_HEALTH",
            "starting_attack_power": "STARTING_ATTACK_POWER",
            "heal_amount": "HEAL_AMOUNT",
            "text_delay_ms": "TEXT_DELAY_MS",
        }
        values: dict[str, object] = {}
        for field_name, suffix in env_fields.items():
            value = os.getenv(ENV_PREFIX + suffix)
            if value:
                values[field_name] = value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
