"""
Stateless Skills for Fantasy Quest.

Skills are pure functions that:
- Take structured input (Pydantic models)
- Execute game rules
- Return structured output, including the narration they produce
- NEVER read input or render output themselves
"""

from src.skills.combat import AttackResult, HealResult, heal, resolve_attack

__all__ = [
    "resolve_attack",
    "heal",
    "AttackResult",
    "HealResult",
]
