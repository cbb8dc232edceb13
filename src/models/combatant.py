"""
Combatant Models for Fantasy Quest.

A single combatant type covers both the player and the enemies they fight.
The role tag decides which extra capabilities apply (only players heal).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CombatantRole(str, Enum):
    """Which side a combatant fights on."""

    PLAYER = "player"
    ENEMY = "enemy"


class Combatant(BaseModel):
    """
    Anything that can deal and take damage.

    Health is deliberately unclamped: it may drop below zero after damage,
    and "alive" is defined as health > 0.
    """

    name: str = Field(min_length=1, max_length=255)
    health: int = Field(description="Current health, may go negative")
    attack_power: int = Field(gt=0, frozen=True, description="Damage per basic attack")
    role: CombatantRole = CombatantRole.ENEMY

    def receive_damage(self, amount: int) -> None:
        """Subtract damage from health. A negative amount heals."""
        self.health -= amount

    def is_alive(self) -> bool:
        """Check if this combatant is still standing."""
        return self.health > 0

    def is_player(self) -> bool:
        """Check if this combatant is the player character."""
        return self.role == CombatantRole.PLAYER


def create_player(name: str, health: int = 100, attack_power: int = 20) -> Combatant:
    """Factory function to create the player combatant."""
    return Combatant(
        name=name,
        health=health,
        attack_power=attack_power,
        role=CombatantRole.PLAYER,
    )


def create_enemy(name: str, health: int, attack_power: int) -> Combatant:
    """Factory function to create an enemy combatant."""
    return Combatant(
        name=name,
        health=health,
        attack_power=attack_power,
        role=CombatantRole.ENEMY,
    )
