"""
Scenario Models for Fantasy Quest.

A scenario is one unit of campaign content. There are exactly two kinds:

- ChoiceScenario: pick one option from a table, apply a fixed health outcome
- BattleScenario: fight a single scripted enemy until one side falls

Scenarios are pure data. Playing them lives in src.engine.scenarios.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from src.models.combatant import Combatant, CombatantRole
from src.models.event import RunEvent


class ChoiceScenario(BaseModel):
    """
    A multiple-choice event with a scripted outcome per option.

    `choices`, `outcomes` and `results` are parallel tables: option i is
    labelled choices[i], changes player health by outcomes[i] and is
    narrated with results[i].
    """

    model_config = {"frozen": True}

    kind: Literal["choice"] = "choice"
    description: str
    choices: tuple[str, ...] = Field(min_length=1)
    outcomes: tuple[int, ...] = Field(description="Health change per option (+ heals, - hurts)")
    results: tuple[str, ...]

    @model_validator(mode="after")
    def _check_parallel_tables(self) -> ChoiceScenario:
        n = len(self.choices)
        if len(self.outcomes) != n or len(self.results) != n:
            raise ValueError(
                f"choices, outcomes and results must have equal length "
                f"(got {n}, {len(self.outcomes)}, {len(self.results)})"
            )
        return self

    @property
    def option_count(self) -> int:
        """Number of selectable options."""
        return len(self.choices)


class BattleScenario(BaseModel):
    """
    A turn-based fight against one enemy.

    The stored enemy is a template; each play fights a fresh copy.
    """

    model_config = {"frozen": True}

    kind: Literal["battle"] = "battle"
    enemy: Combatant

    @model_validator(mode="after")
    def _check_enemy_role(self) -> BattleScenario:
        if self.enemy.role != CombatantRole.ENEMY:
            raise ValueError(f"{self.enemy.name} is not an enemy")
        return self

    def spawn_enemy(self) -> Combatant:
        """Create the enemy instance for one play of this battle."""
        return self.enemy.model_copy()


Scenario = Annotated[ChoiceScenario | BattleScenario, Field(discriminator="kind")]


class ScenarioResult(BaseModel):
    """What happened when a scenario was played."""

    kind: Literal["choice", "battle"]
    events: list[RunEvent] = Field(default_factory=list)
    health_delta: int = Field(default=0, description="Change in player health")

    # Choice scenarios
    selection: int | None = Field(default=None, description="Raw 1-based selection")
    valid_selection: bool = True

    # Battle scenarios
    enemy: Combatant | None = Field(default=None, description="Enemy state at the end")
    rounds: int = Field(default=0, ge=0)
    player_won: bool | None = None
