"""Per-game boxscores from the ESPN summary endpoint."""

import asyncio
import logging

from config import ESPN_SITE_BASE
from errors import UpstreamDataError
from espn.normalize import parse_boxscore
from models import Boxscore, LiveGameSnapshot
from utils import fetch_json

logger = logging.getLogger(__name__)

# Scheduled games have no boxscore yet.
BOXSCORE_STATUSES = ("live", "halftime", "final")


async def fetch_game_boxscore(game_id: str) -> Boxscore:
    data = await fetch_json(f"{ESPN_SITE_BASE}/summary", {"event": game_id})
    return parse_boxscore(game_id, data)


async def fetch_all_boxscores(games: list[LiveGameSnapshot]) -> dict[str, Boxscore]:
    """Boxscores for every started game, keyed by game id.

    Fetched concurrently; a game whose fetch fails is left out.
    """
    started = [g for g in games if g.status in BOXSCORE_STATUSES]
    if not started:
        return {}

    results = await asyncio.gather(
        *(fetch_game_boxscore(g.game_id) for g in started),
        return_exceptions=True,
    )
    boxscores: dict[str, Boxscore] = {}
    for game, result in zip(started, results):
        if isinstance(result, UpstreamDataError):
            logger.warning("[espn] boxscore %s unavailable: %s", game.game_id, result)
            continue
        if isinstance(result, BaseException):
            raise result
        boxscores[game.game_id] = result
    logger.info("[espn] boxscores: %d/%d", len(boxscores), len(started))
    return boxscores
