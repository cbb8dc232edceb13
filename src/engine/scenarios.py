"""
Scenario resolution for Fantasy Quest.

Plays a single scenario against the player:

- Choice: present options, read one selection, apply the scripted outcome
- Battle: alternate player action and enemy retaliation until one side falls

Every line of narration is sent to the narrator as soon as it is produced
(menus have to be visible before input is read) and is also collected into
the returned ScenarioResult.
"""

from __future__ import annotations

import logging

from src.engine.narration import InputSource, Narrator
from src.models.combatant import Combatant
from src.models.event import Emphasis, EventType, RunEvent, create_event
from src.models.scenario import BattleScenario, ChoiceScenario, ScenarioResult
from src.skills.combat import heal, resolve_attack

logger = logging.getLogger(__name__)

ATTACK_ACTION = 1
HEAL_ACTION = 2
DEFAULT_HEAL_AMOUNT = 10


class _EventLog:
    """Collects events while forwarding them to the narrator."""

    def __init__(self, narrator: Narrator) -> None:
        self.narrator = narrator
        self.events: list[RunEvent] = []

    def emit(self, event: RunEvent) -> None:
        self.events.append(event)
        self.narrator.narrate(event)

    def say(
        self, event_type: EventType, text: str, emphasis: Emphasis = Emphasis.NEUTRAL
    ) -> None:
        self.emit(create_event(event_type, text, emphasis))

    def extend(self, events: list[RunEvent]) -> None:
        for event in events:
            self.emit(event)


def play_choice(
    scenario: ChoiceScenario,
    player: Combatant,
    narrator: Narrator,
    inputs: InputSource,
) -> ScenarioResult:
    """
    Play a choice scenario.

    An out-of-range or unreadable selection is narrated as invalid and the
    scenario ends with no effect; it still counts as played.

    Args:
        scenario: The choice table to present
        player: The player (mutated)
        narrator: Where narration goes
        inputs: Where the selection comes from

    Returns:
        ScenarioResult with the selection and the health change
    """
    log = _EventLog(narrator)
    log.say(EventType.DESCRIPTION, scenario.description)
    for number, choice in enumerate(scenario.choices, start=1):
        log.say(EventType.OPTION, f"[{number}] {choice}", Emphasis.INFO)

    selection = inputs.read_selection()
    index = selection - 1 if selection is not None else -1

    if not 0 <= index < scenario.option_count:
        logger.info("Invalid choice %r for %d options", selection, scenario.option_count)
        log.say(EventType.INVALID_CHOICE, "Invalid choice.", Emphasis.NEGATIVE)
        return ScenarioResult(
            kind="choice",
            events=log.events,
            selection=selection,
            valid_selection=False,
        )

    outcome = scenario.outcomes[index]
    if outcome != 0:
        player.receive_damage(-outcome)
    log.say(EventType.RESULT, scenario.results[index])

    return ScenarioResult(
        kind="choice",
        events=log.events,
        selection=selection,
        health_delta=outcome,
    )


def play_battle(
    scenario: BattleScenario,
    player: Combatant,
    narrator: Narrator,
    inputs: InputSource,
    heal_amount: int = DEFAULT_HEAL_AMOUNT,
) -> ScenarioResult:
    """
    Play a battle scenario.

    Each round the player picks Attack or Heal; any other answer forfeits
    the player's action. The enemy strikes back every round it survives.
    The loop has no round limit: the enemy's attack power is positive, so
    every round it survives costs the player health.

    Args:
        scenario: The battle to fight
        player: The player (mutated)
        narrator: Where narration goes
        inputs: Where actions come from
        heal_amount: Health restored by the Heal action

    Returns:
        ScenarioResult with the final enemy state and the winner
    """
    log = _EventLog(narrator)
    enemy = scenario.spawn_enemy()
    starting_health = player.health
    rounds = 0

    log.say(EventType.ENCOUNTER, f"You encounter the {enemy.name}!")

    while player.is_alive() and enemy.is_alive():
        rounds += 1
        log.say(EventType.ACTION_MENU, "Choose your action:")
        log.say(EventType.ACTION_MENU, f"[{ATTACK_ACTION}] Attack", Emphasis.INFO)
        log.say(EventType.ACTION_MENU, f"[{HEAL_ACTION}] Heal", Emphasis.INFO)

        action = inputs.read_selection()
        if action == ATTACK_ACTION:
            log.extend(resolve_attack(player, enemy).events)
        elif action == HEAL_ACTION:
            log.extend(heal(player, heal_amount).events)
        else:
            logger.info("Invalid battle action %r in round %d", action, rounds)
            log.say(EventType.INVALID_CHOICE, "Invalid choice!", Emphasis.NEGATIVE)

        if enemy.is_alive():
            log.extend(resolve_attack(enemy, player).events)

        log.say(EventType.HEALTH_STATUS, f"{player.name} Health: {player.health}")
        log.say(EventType.HEALTH_STATUS, f"{enemy.name} Health: {enemy.health}")

    player_won = player.is_alive()
    if player_won:
        log.say(EventType.BATTLE_WON, f"You have defeated the {enemy.name}!", Emphasis.POSITIVE)
    else:
        log.say(
            EventType.BATTLE_LOST,
            f"You have been defeated by the {enemy.name}.",
            Emphasis.NEGATIVE,
        )
    logger.debug("Battle against %s ended after %d rounds", enemy.name, rounds)

    return ScenarioResult(
        kind="battle",
        events=log.events,
        health_delta=player.health - starting_health,
        enemy=enemy,
        rounds=rounds,
        player_won=player_won,
    )


def play_scenario(
    scenario: ChoiceScenario | BattleScenario,
    player: Combatant,
    narrator: Narrator,
    inputs: InputSource,
    heal_amount: int = DEFAULT_HEAL_AMOUNT,
) -> ScenarioResult:
    """Play any scenario, dispatching on its kind."""
    if isinstance(scenario, ChoiceScenario):
        return play_choice(scenario, player, narrator, inputs)
    if isinstance(scenario, BattleScenario):
        return play_battle(scenario, player, narrator, inputs, heal_amount)
    raise TypeError(f"Unknown scenario type: {type(scenario).__name__}")
