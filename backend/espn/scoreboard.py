"""Scoreboard fetches. Never cached: scores change between requests."""

import logging

from config import ESPN_SITE_BASE
from espn.normalize import parse_scoreboard
from models import LiveGameSnapshot
from utils import fetch_json

logger = logging.getLogger(__name__)


async def fetch_live_scores() -> list[LiveGameSnapshot]:
    """Today's scoreboard as ESPN defines today."""
    data = await fetch_json(f"{ESPN_SITE_BASE}/scoreboard")
    games = parse_scoreboard(data)
    logger.info("[espn] scoreboard: %d games", len(games))
    return games


async def fetch_scores_by_date(date_str: str) -> list[LiveGameSnapshot]:
    """Scoreboard for a YYYYMMDD date."""
    data = await fetch_json(f"{ESPN_SITE_BASE}/scoreboard", {"dates": date_str})
    games = parse_scoreboard(data)
    logger.info("[espn] scoreboard %s: %d games", date_str, len(games))
    return games
