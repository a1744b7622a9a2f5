"""Per-intent data gathering.

Every provider call goes through `_safe`, so a failed fetch becomes an empty
default and the request carries on with whatever else arrived.
"""

from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, TypeVar

import espn
from config import DATA_SOURCE, DATA_SOURCE_UNAVAILABLE
from errors import UpstreamDataError
from intents import (
    ComparisonIntent,
    GameRecapIntent,
    GamesIntent,
    LeadersIntent,
    PlayerIntent,
    StandingsIntent,
    TeamIntent,
    UserIntent,
)
from models import Boxscore, LiveGameSnapshot, PlayerProfile, Standings
from visuals import find_team_game

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DataBundle:
    games: list[LiveGameSnapshot] = field(default_factory=list)
    boxscores: dict[str, Boxscore] = field(default_factory=dict)
    standings: Standings | None = None
    # requested name -> profile, None when search or fetch failed
    players: dict[str, PlayerProfile | None] = field(default_factory=dict)
    recap_game: LiveGameSnapshot | None = None
    recap_boxscore: Boxscore | None = None
    notes: list[str] = field(default_factory=list)
    source: str = DATA_SOURCE
    last_updated: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    scores_failed: bool = False


class _Failed:
    """Marker returned by _safe so callers can tell failure from empty data."""


FAILED = _Failed()


async def _safe(label: str, call: Awaitable[T], default: T) -> T:
    try:
        return await call
    except UpstreamDataError as e:
        logger.warning("[gather] %s failed: %s", label, e)
    except Exception as e:
        logger.exception("[gather] %s raised %s", label, e.__class__.__name__)
    return default


async def _scores(bundle: DataBundle, date_str: str | None = None) -> list[LiveGameSnapshot]:
    call = espn.fetch_scores_by_date(date_str) if date_str else espn.fetch_live_scores()
    games = await _safe(f"scoreboard {date_str or 'today'}", call, FAILED)
    if games is FAILED:
        bundle.scores_failed = True
        bundle.source = DATA_SOURCE_UNAVAILABLE
        return []
    return games


async def _boxscores(games: list[LiveGameSnapshot]) -> dict[str, Boxscore]:
    return await _safe("boxscores", espn.fetch_all_boxscores(games), {})


async def _profile(name: str) -> PlayerProfile | None:
    return await _safe(f"player {name}", espn.fetch_player_profile(name), None)


async def _with_games(bundle: DataBundle, boxscores: bool = True, date_str: str | None = None):
    bundle.games = await _scores(bundle, date_str)
    if boxscores and bundle.games:
        bundle.boxscores = await _boxscores(bundle.games)


async def gather_data(intent: UserIntent) -> DataBundle:
    """Fetch what the intent needs. Never raises on provider failure."""
    bundle = DataBundle()

    if isinstance(intent, GamesIntent):
        await _with_games(bundle, date_str=intent.date_str if intent.filter == "date" else None)

    elif isinstance(intent, GameRecapIntent):
        await _gather_recap(bundle, intent)

    elif isinstance(intent, StandingsIntent):
        bundle.standings, _ = await asyncio.gather(
            _safe("standings", espn.fetch_standings(), None),
            _with_games(bundle, boxscores=False),
        )

    elif isinstance(intent, PlayerIntent):
        profile, _ = await asyncio.gather(_profile(intent.name), _with_games(bundle))
        bundle.players[intent.name] = profile

    elif isinstance(intent, ComparisonIntent):
        p1, p2, _ = await asyncio.gather(
            _profile(intent.player1),
            _profile(intent.player2),
            _with_games(bundle, boxscores=False),
        )
        bundle.players[intent.player1] = p1
        bundle.players[intent.player2] = p2

    elif isinstance(intent, TeamIntent):
        bundle.standings, _ = await asyncio.gather(
            _safe("standings", espn.fetch_standings(), None),
            _with_games(bundle, boxscores=False),
        )

    elif isinstance(intent, LeadersIntent):
        await _with_games(bundle)

    else:
        await _with_games(bundle, boxscores=False)

    logger.info(
        "[gather] %s: %d games, %d boxscores, %d players, source=%s",
        intent.type, len(bundle.games), len(bundle.boxscores), len(bundle.players), bundle.source,
    )
    return bundle


async def _gather_recap(bundle: DataBundle, intent: GameRecapIntent):
    bundle.games = await _scores(bundle, intent.date_str)
    game = find_team_game(bundle.games, intent.team)
    if game is None:
        if bundle.scores_failed:
            return
        available = ", ".join(
            f"{g.away_team.name} @ {g.home_team.name}" for g in bundle.games
        ) or "none"
        bundle.notes.append(
            f"No {intent.team} game found on {intent.date_display}. Available games were: {available}"
        )
        return

    bundle.recap_game = game
    if game.status != "scheduled":
        bundle.recap_boxscore = await _safe(
            f"boxscore {game.game_id}", espn.fetch_game_boxscore(game.game_id), None
        )
