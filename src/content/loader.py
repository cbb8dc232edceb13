"""
Campaign file loading.

Campaigns are plain data, so they can be authored as JSON documents
matching the Campaign model and played without code changes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.models.campaign import Campaign

logger = logging.getLogger(__name__)


def load_campaign(path: str | Path) -> Campaign:
    """
    Load a campaign from a JSON file.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the document is not a valid campaign
    """
    path = Path(path)
    campaign = Campaign.model_validate_json(path.read_text(encoding="utf-8"))
    if campaign.player is not None:
        logger.warning("Ignoring player stored in %s; runs create their own", path)
        campaign.player = None
    logger.debug("Loaded campaign %r with %d scenarios", campaign.title, len(campaign.scenarios))
    return campaign


def dump_campaign(campaign: Campaign, path: str | Path) -> None:
    """Write a campaign's content to a JSON file."""
    Path(path).write_text(
        campaign.model_dump_json(indent=2, exclude={"player"}),
        encoding="utf-8",
    )
