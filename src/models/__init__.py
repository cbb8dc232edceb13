"""
Core Data Models for Fantasy Quest.

These models define the content and state of a playthrough:
combatants, scenarios, campaigns and the narration events a run emits.
"""

from src.models.campaign import Campaign, RunResult
from src.models.combatant import Combatant, CombatantRole, create_enemy, create_player
from src.models.event import Emphasis, EventType, RunEvent, create_event
from src.models.scenario import BattleScenario, ChoiceScenario, Scenario, ScenarioResult

__all__ = [
    # Combatant
    "Combatant",
    "CombatantRole",
    "create_player",
    "create_enemy",
    # Events
    "Emphasis",
    "EventType",
    "RunEvent",
    "create_event",
    # Scenarios
    "Scenario",
    "ChoiceScenario",
    "BattleScenario",
    "ScenarioResult",
    # Campaign
    "Campaign",
    "RunResult",
]
