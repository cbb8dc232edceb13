"""
Campaign Model for Fantasy Quest.

A campaign is one complete playthrough: the framing text, the ordered
scenarios, and (once a run starts) the player.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.models.combatant import Combatant
from src.models.scenario import Scenario, ScenarioResult

BANNER_WIDTH = 81


class Campaign(BaseModel):
    """
    An ordered sequence of scenarios plus the player walking through them.

    Scenario order is the narrative order and never changes during play.
    """

    title: str = Field(min_length=1)
    introduction: tuple[str, ...] = ()
    epilogue: tuple[str, ...] = ()
    scenarios: tuple[Scenario, ...] = Field(min_length=1)
    player: Combatant | None = Field(default=None, description="Set when a run starts")

    def banner_lines(self) -> list[str]:
        """Build the star banner framing the campaign title."""
        title = f"     {self.title.upper()}     "
        stars = "*" * max(BANNER_WIDTH, len(title) + 2)
        return [stars, stars, title.center(len(stars), "*"), stars, stars]


class RunResult(BaseModel):
    """Outcome of a full campaign run."""

    player: Combatant
    results: list[ScenarioResult] = Field(default_factory=list)
    victory: bool

    @property
    def scenarios_played(self) -> int:
        """How many scenarios were started before the run ended."""
        return len(self.results)
