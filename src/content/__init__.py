"""Campaign content for Fantasy Quest."""

from src.content.fantasy_quest import create_fantasy_quest_campaign
from src.content.loader import dump_campaign, load_campaign

__all__ = [
    "create_fantasy_quest_campaign",
    "load_campaign",
    "dump_campaign",
]
