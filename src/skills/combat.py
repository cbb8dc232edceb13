"""
Combat Skill.

Stateless attack and heal resolution between combatants. Each function
mutates only the combatant it targets and describes what happened as
RunEvents for the caller to narrate.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.models.combatant import Combatant
from src.models.event import Emphasis, EventType, RunEvent, create_event


class AttackResult(BaseModel):
    """Result of one basic attack."""

    attacker: str
    target: str
    damage: int = Field(description="Damage applied to the target")
    target_health: int = Field(description="Target health after the attack")
    target_defeated: bool = False
    events: list[RunEvent] = Field(default_factory=list)


class HealResult(BaseModel):
    """Result of a heal."""

    target: str
    amount: int
    health: int = Field(description="Health after healing")
    events: list[RunEvent] = Field(default_factory=list)


def resolve_attack(attacker: Combatant, target: Combatant) -> AttackResult:
    """
    Resolve a basic attack.

    Damage is the attacker's attack power, capped at the target's remaining
    health, so a finishing blow lands the target on exactly 0.

    Args:
        attacker: The combatant attacking
        target: The combatant being hit (mutated)

    Returns:
        AttackResult with the damage dealt and narration
    """
    damage = min(attacker.attack_power, target.health)
    target.receive_damage(damage)

    events = [
        create_event(
            EventType.ATTACK,
            f"{attacker.name} attacks {target.name} for {damage} damage!",
        )
    ]
    defeated = not target.is_alive()
    if defeated:
        events.append(
            create_event(EventType.DEFEATED, f"{target.name} is defeated!", Emphasis.NEGATIVE)
        )

    return AttackResult(
        attacker=attacker.name,
        target=target.name,
        damage=damage,
        target_health=target.health,
        target_defeated=defeated,
        events=events,
    )


def heal(player: Combatant, amount: int) -> HealResult:
    """
    Restore health to the player.

    Raises:
        ValueError: If the combatant is not the player
    """
    if not player.is_player():
        raise ValueError(f"Only the player can heal, not {player.name}")

    player.receive_damage(-amount)
    return HealResult(
        target=player.name,
        amount=amount,
        health=player.health,
        events=[create_event(EventType.HEAL, f"{player.name} heals for {amount} health!")],
    )
