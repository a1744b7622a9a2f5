"""Player search and season averages. Both are cached for CACHE_TTL_PLAYERS."""

import logging

from cache import cache
from config import CACHE_TTL_PLAYERS, ESPN_COMMON_BASE
from espn.normalize import parse_player_stats, pick_player
from models import PlayerProfile, PlayerSearchHit, PlayerSeasonStats
from utils import fetch_json

logger = logging.getLogger(__name__)


async def search_player(name: str) -> PlayerSearchHit | None:
    """Best NBA match for a name, or None when nobody matches."""
    cache_key = f"player_search:{name.lower()}"
    cached = cache.get(cache_key)
    if cached:
        return cached

    data = await fetch_json(
        f"{ESPN_COMMON_BASE}/search",
        {"query": name, "limit": 10, "type": "player"},
    )
    hit = pick_player(data, name)
    if hit is None:
        logger.info("[espn] no NBA player found for %r", name)
        return None

    logger.info("[espn] player %r -> %s (%s)", name, hit.name, hit.id)
    cache.set(cache_key, hit, CACHE_TTL_PLAYERS)
    return hit


async def fetch_player_season_stats(player_id: str) -> PlayerSeasonStats | None:
    cache_key = f"player_stats:{player_id}"
    cached = cache.get(cache_key)
    if cached:
        return cached

    data = await fetch_json(f"{ESPN_COMMON_BASE}/sports/basketball/nba/athletes/{player_id}/overview")
    stats = parse_player_stats(player_id, data)
    if stats is not None:
        cache.set(cache_key, stats, CACHE_TTL_PLAYERS)
    return stats


async def fetch_player_profile(name: str) -> PlayerProfile | None:
    """Search, then season stats. The stats call depends on the search hit."""
    hit = await search_player(name)
    if hit is None:
        return None
    stats = await fetch_player_season_stats(hit.id)
    return PlayerProfile(hit=hit, stats=stats)
