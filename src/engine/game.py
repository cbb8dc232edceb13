"""
Game Engine for Fantasy Quest.

The run driver: frames the campaign, creates the player, plays scenarios
in order until the campaign ends or the player falls, and reports the
final outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.engine.models import GameConfig
from src.engine.narration import InputSource, Narrator
from src.engine.scenarios import play_scenario
from src.models.campaign import Campaign, RunResult
from src.models.combatant import Combatant, create_player
from src.models.event import Emphasis, EventType, create_event
from src.models.scenario import BattleScenario, ChoiceScenario, ScenarioResult

logger = logging.getLogger(__name__)

NAME_PROMPT = "O Brave Adventurer! Say your name to enter the world of {title}: "
GAME_OVER_TEXT = "Game Over! Your journey ends here."


class GameEngine:
    """
    Drives one playthrough of a campaign.

    All output goes through the narrator and all input through the input
    source, so a run can be scripted end to end without a terminal.
    """

    def __init__(
        self,
        narrator: Narrator,
        inputs: InputSource,
        config: GameConfig | None = None,
    ) -> None:
        self.narrator = narrator
        self.inputs = inputs
        self.config = config or GameConfig()

    def _say(
        self,
        event_type: EventType,
        text: str,
        emphasis: Emphasis = Emphasis.NEUTRAL,
        paced: bool = True,
    ) -> None:
        self.narrator.narrate(create_event(event_type, text, emphasis, paced))

    def run(self, campaign: Campaign) -> RunResult:
        """
        Play a campaign from banner to epilogue.

        Args:
            campaign: The campaign to play; its player is replaced

        Returns:
            RunResult with the final player state and every scenario result
        """
        for line in campaign.banner_lines():
            self._say(EventType.BANNER, line, paced=False)

        player = self.create_player(campaign.title)
        campaign.player = player

        for line in campaign.introduction:
            self._say(EventType.INTRODUCTION, line)

        results = self.play_scenarios(player, campaign.scenarios)
        victory = player.is_alive()

        if victory:
            for position, line in enumerate(campaign.epilogue):
                emphasis = Emphasis.POSITIVE if position == 0 else Emphasis.NEUTRAL
                self._say(EventType.EPILOGUE, line, emphasis)
        else:
            self._say(EventType.GAME_OVER, GAME_OVER_TEXT, Emphasis.NEGATIVE)

        logger.info(
            "Run finished: %s after %d/%d scenarios (health %d)",
            "victory" if victory else "defeat",
            len(results),
            len(campaign.scenarios),
            player.health,
        )
        return RunResult(player=player, results=results, victory=victory)

    def create_player(self, title: str) -> Combatant:
        """Ask for the player's name and create their character."""
        self._say(EventType.PROMPT, NAME_PROMPT.format(title=title))
        name = self.inputs.read_line() or self.config.default_player_name
        player = create_player(
            name,
            health=self.config.starting_health,
            attack_power=self.config.starting_attack_power,
        )
        self._say(EventType.WELCOME, f"Welcome, {name}!")
        return player

    def play_scenarios(
        self,
        player: Combatant,
        scenarios: Iterable[ChoiceScenario | BattleScenario],
    ) -> list[ScenarioResult]:
        """
        Play scenarios in order while the player is alive.

        Returns:
            One result per scenario actually started
        """
        results: list[ScenarioResult] = []
        for position, scenario in enumerate(scenarios, start=1):
            if not player.is_alive():
                logger.debug("Player fell; skipping scenario %d onwards", position)
                break
            logger.debug("Playing scenario %d (%s)", position, scenario.kind)
            results.append(
                play_scenario(
                    scenario,
                    player,
                    self.narrator,
                    self.inputs,
                    heal_amount=self.config.heal_amount,
                )
            )
        return results
