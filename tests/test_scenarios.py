"""
Tests for choice and battle scenario resolution.
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from src.engine import RecordingNarrator, ScriptedInput, play_battle, play_choice, play_scenario
from src.models import (
    BattleScenario,
    ChoiceScenario,
    Emphasis,
    EventType,
    create_enemy,
    create_player,
)

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def narrator() -> RecordingNarrator:
    return RecordingNarrator()


@pytest.fixture
def river() -> ChoiceScenario:
    """A three-way choice with a penalty, a reward and a neutral option."""
    return ChoiceScenario(
        description="You reach a river.",
        choices=["Swim", "Build a raft", "Wait"],
        outcomes=[-15, 20, 0],
        results=["You lose health.", "You gain health.", "Nothing happens."],
    )


@pytest.fixture
def goblin_battle() -> BattleScenario:
    return BattleScenario(enemy=create_enemy("Goblin", 30, 10))


# =============================================================================
# Choice Scenarios
# =============================================================================


class TestChoiceScenarioModel:
    """Tests for choice table validation."""

    def test_mismatched_outcomes_rejected(self):
        with pytest.raises(ValidationError, match="equal length"):
            ChoiceScenario(
                description="Fork",
                choices=["Left", "Right"],
                outcomes=[-10],
                results=["a", "b"],
            )

    def test_mismatched_results_rejected(self):
        with pytest.raises(ValidationError):
            ChoiceScenario(
                description="Fork",
                choices=["Left", "Right"],
                outcomes=[-10, 0],
                results=["a"],
            )

    def test_empty_choices_rejected(self):
        with pytest.raises(ValidationError):
            ChoiceScenario(description="Nothing", choices=[], outcomes=[], results=[])

    def test_scenario_is_immutable(self, river: ChoiceScenario):
        with pytest.raises(ValidationError):
            river.description = "Changed"


class TestPlayChoice:
    """Tests for playing a choice scenario."""

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_valid_selection_applies_outcome(
        self, river: ChoiceScenario, narrator: RecordingNarrator, index: int
    ):
        player = create_player("Aria")

        result = play_choice(river, player, narrator, ScriptedInput([index + 1]))

        assert player.health == 100 + river.outcomes[index]
        assert result.health_delta == river.outcomes[index]
        assert result.selection == index + 1
        assert result.valid_selection
        assert narrator.lines[-1] == river.results[index]

    @pytest.mark.parametrize("response", [0, 4, -1, "north", "", None])
    def test_invalid_selection_has_no_effect(
        self, river: ChoiceScenario, narrator: RecordingNarrator, response
    ):
        player = create_player("Aria")
        responses = [] if response is None else [response]

        result = play_choice(river, player, narrator, ScriptedInput(responses))

        assert player.health == 100
        assert result.health_delta == 0
        assert not result.valid_selection
        last = narrator.events[-1]
        assert last.type == EventType.INVALID_CHOICE
        assert last.text == "Invalid choice."
        assert last.emphasis == Emphasis.NEGATIVE

    def test_presents_description_then_numbered_options(
        self, river: ChoiceScenario, narrator: RecordingNarrator
    ):
        play_choice(river, create_player("Aria"), narrator, ScriptedInput([3]))

        assert narrator.lines == [
            "You reach a river.",
            "[1] Swim",
            "[2] Build a raft",
            "[3] Wait",
            "Nothing happens.",
        ]
        assert all(e.emphasis == Emphasis.INFO for e in narrator.events[1:4])

    def test_result_events_match_narration(
        self, river: ChoiceScenario, narrator: RecordingNarrator
    ):
        result = play_choice(river, create_player("Aria"), narrator, ScriptedInput([1]))
        assert result.events == narrator.events

    def test_fork_in_the_road(self, narrator: RecordingNarrator):
        """Left costs 10 health, right costs nothing."""
        fork = ChoiceScenario(
            description="A fork in the road.",
            choices=["Left", "Right"],
            outcomes=[-10, 0],
            results=["Longer path.", "Shorter path."],
        )

        left = create_player("Aria")
        play_choice(fork, left, narrator, ScriptedInput([1]))
        right = create_player("Aria")
        play_choice(fork, right, narrator, ScriptedInput([2]))

        assert left.health == 90
        assert right.health == 100


# =============================================================================
# Battle Scenarios
# =============================================================================


class TestBattleScenarioModel:
    """Tests for battle scenario construction."""

    def test_enemy_must_have_enemy_role(self):
        with pytest.raises(ValidationError, match="not an enemy"):
            BattleScenario(enemy=create_player("Aria"))

    def test_spawn_enemy_returns_fresh_copy(self, goblin_battle: BattleScenario):
        enemy = goblin_battle.spawn_enemy()
        enemy.receive_damage(25)
        assert goblin_battle.enemy.health == 30


class TestPlayBattle:
    """Tests for the battle turn loop."""

    def test_goblin_falls_to_two_attacks(
        self, goblin_battle: BattleScenario, narrator: RecordingNarrator
    ):
        player = create_player("Aria")

        result = play_battle(goblin_battle, player, narrator, ScriptedInput([1, 1]))

        assert result.player_won is True
        assert result.rounds == 2
        assert player.health == 90
        assert result.health_delta == -10
        assert result.enemy is not None
        assert not result.enemy.is_alive()
        retaliations = [e for e in narrator.events if e.text.startswith("Goblin attacks")]
        assert len(retaliations) == 1

    def test_battle_narration_order(
        self, goblin_battle: BattleScenario, narrator: RecordingNarrator
    ):
        play_battle(goblin_battle, create_player("Aria"), narrator, ScriptedInput([1, 1]))

        assert narrator.lines == [
            "You encounter the Goblin!",
            "Choose your action:",
            "[1] Attack",
            "[2] Heal",
            "Aria attacks Goblin for 20 damage!",
            "Goblin attacks Aria for 10 damage!",
            "Aria Health: 90",
            "Goblin Health: 10",
            "Choose your action:",
            "[1] Attack",
            "[2] Heal",
            "Aria attacks Goblin for 10 damage!",
            "Goblin is defeated!",
            "Aria Health: 90",
            "Goblin Health: 0",
            "You have defeated the Goblin!",
        ]
        assert narrator.events[-1].emphasis == Emphasis.POSITIVE

    def test_heal_then_attack(self, goblin_battle: BattleScenario, narrator: RecordingNarrator):
        player = create_player("Aria")

        result = play_battle(goblin_battle, player, narrator, ScriptedInput([2, 1, 1]))

        assert result.rounds == 3
        assert player.health == 90
        assert "Aria heals for 10 health!" in narrator.lines

    def test_custom_heal_amount(self, goblin_battle: BattleScenario, narrator: RecordingNarrator):
        player = create_player("Aria")
        play_battle(goblin_battle, player, narrator, ScriptedInput([2, 1, 1]), heal_amount=25)
        assert player.health == 105

    def test_invalid_action_still_lets_enemy_strike(
        self, goblin_battle: BattleScenario, narrator: RecordingNarrator
    ):
        player = create_player("Aria")

        result = play_battle(goblin_battle, player, narrator, ScriptedInput(["x", 1, 1]))

        assert result.rounds == 3
        assert player.health == 80
        invalid = [e for e in narrator.events if e.type == EventType.INVALID_CHOICE]
        assert len(invalid) == 1
        assert invalid[0].text == "Invalid choice!"

    def test_player_defeated(self, narrator: RecordingNarrator):
        ogre = BattleScenario(enemy=create_enemy("Ogre", 100, 60))
        player = create_player("Aria")

        result = play_battle(ogre, player, narrator, ScriptedInput([1, 1]))

        assert result.player_won is False
        assert not player.is_alive()
        assert player.health == 0
        assert result.enemy.health == 60
        assert narrator.lines[-1] == "You have been defeated by the Ogre."
        assert narrator.events[-1].type == EventType.BATTLE_LOST

    def test_template_enemy_untouched_after_play(
        self, goblin_battle: BattleScenario, narrator: RecordingNarrator
    ):
        play_battle(goblin_battle, create_player("Aria"), narrator, ScriptedInput([1, 1]))
        assert goblin_battle.enemy.health == 30

        replay = create_player("Bram")
        result = play_battle(goblin_battle, replay, narrator, ScriptedInput([1, 1]))
        assert result.rounds == 2

    @pytest.mark.parametrize(
        "player_stats,enemy_stats",
        [
            ((100, 20), (30, 10)),
            ((100, 20), (100, 25)),
            ((50, 5), (200, 3)),
            ((10, 1), (10, 1)),
            ((300, 7), (90, 40)),
        ],
    )
    def test_always_attacking_terminates_within_bound(self, player_stats, enemy_stats):
        player = create_player("Aria", health=player_stats[0], attack_power=player_stats[1])
        battle = BattleScenario(enemy=create_enemy("Foe", *enemy_stats))
        bound = math.ceil(
            max(player_stats[0], enemy_stats[0]) / min(player_stats[1], enemy_stats[1])
        ) + 1

        result = play_battle(battle, player, RecordingNarrator(), ScriptedInput([1] * bound))

        assert result.rounds <= bound
        assert not (player.is_alive() and result.enemy.is_alive())

    def test_no_input_ends_with_player_defeat(self, goblin_battle: BattleScenario):
        player = create_player("Aria")

        result = play_battle(goblin_battle, player, RecordingNarrator(), ScriptedInput([]))

        assert result.player_won is False
        assert result.rounds == 10


class TestPlayScenario:
    """Tests for dispatching on scenario kind."""

    def test_dispatches_choice(self, river: ChoiceScenario, narrator: RecordingNarrator):
        result = play_scenario(river, create_player("Aria"), narrator, ScriptedInput([2]))
        assert result.kind == "choice"

    def test_dispatches_battle(self, goblin_battle: BattleScenario, narrator: RecordingNarrator):
        result = play_scenario(
            goblin_battle, create_player("Aria"), narrator, ScriptedInput([1, 1])
        )
        assert result.kind == "battle"

    def test_rejects_unknown_scenario(self, narrator: RecordingNarrator):
        with pytest.raises(TypeError):
            play_scenario("not a scenario", create_player("Aria"), narrator, ScriptedInput([]))
