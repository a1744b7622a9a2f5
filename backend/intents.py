"""Intent classification: an ordered rule table, first match wins."""

from __future__ import annotations
import logging
import re
import datetime as dt
from datetime import date
from typing import Annotated, Callable, Literal, Union

from pydantic import BaseModel, Field

from dates import resolve_date, to_date_str
from matching import (
    find_alias_in_message,
    find_team,
    fuzzy_scan,
    lookup_player,
    resolve_alias,
)

logger = logging.getLogger(__name__)


class GamesIntent(BaseModel):
    type: Literal["games"] = "games"
    filter: Literal["live", "team", "date"] | None = None
    team: str | None = None  # abbreviation
    date_str: str | None = None
    date_display: str | None = None


class GameRecapIntent(BaseModel):
    type: Literal["game_recap"] = "game_recap"
    team: str  # full team name
    team_abbreviation: str
    date: dt.date
    date_str: str
    date_display: str


class StandingsIntent(BaseModel):
    type: Literal["standings"] = "standings"
    conference: Literal["east", "west", "both"] = "both"


class PlayerIntent(BaseModel):
    type: Literal["player"] = "player"
    name: str


class ComparisonIntent(BaseModel):
    type: Literal["comparison"] = "comparison"
    player1: str
    player2: str


class TeamIntent(BaseModel):
    type: Literal["team"] = "team"
    name: str


class LeadersIntent(BaseModel):
    type: Literal["leaders"] = "leaders"
    category: Literal["points", "rebounds", "assists", "steals", "blocks"] = "points"


class GeneralIntent(BaseModel):
    type: Literal["general"] = "general"


UserIntent = Annotated[
    Union[
        GamesIntent, GameRecapIntent, StandingsIntent, PlayerIntent,
        ComparisonIntent, TeamIntent, LeadersIntent, GeneralIntent,
    ],
    Field(discriminator="type"),
]

Rule = Callable[[str, date], "UserIntent | None"]


# --- Patterns ---

COMPARISON_PATTERNS = [
    re.compile(r"compare\s+(.+?)\s+(?:vs?\.?|versus|and|to|with)\s+(.+)"),
    re.compile(r"(.+?)\s+(?:vs?\.?|versus)\s+(.+)"),
    re.compile(r"who(?:'s|s| is)\s+better[,:]?\s+(.+?)\s+or\s+(.+)"),
    re.compile(r"(.+?)\s+or\s+(.+?)[,]?\s+who(?:'s|s| is)\s+better"),
    re.compile(r"between\s+(.+?)\s+and\s+(.+)"),
]

_NAME_PREFIX_RE = re.compile(
    r"^(?:tell me about|show me|what about|who is|stats for|statistics for|the)\s+"
)
_NAME_SUFFIX_RE = re.compile(r"\s+(?:stats|statistics|performance|numbers|averages)\b.*$")

# Words that make a captured comparison side a topic rather than a name.
_NON_PLAYER_RE = re.compile(
    r"\b(?:standings?|games?|scores?|east(?:ern)?|west(?:ern)?|conference|teams?|season|"
    r"tonight|today|yesterday|how|did|what|happened|recap|results?|won|wins?|lost|beat|play(?:ing|ed)?)\b"
)

STANDINGS_RE = re.compile(r"\b(?:standing|rank|playoff|seeding)")
EAST_RE = re.compile(r"\beast")
WEST_RE = re.compile(r"\bwest")

PLAYER_QUERY_PATTERNS = [
    re.compile(
        r"how (?:many|did|is|was|does|has)\s+(?:\w+\s+){0,3}(\w+(?:\s+\w+)?)\s+"
        r"(?:score|play|do|perform|have)"
    ),
    re.compile(
        r"(?:tell me about|show me|what about|who is|stats for|statistics for|give me the stats of)"
        r"\s+(.+?)(?:\?|$)"
    ),
    re.compile(r"([\w\-]+(?:\s+[\w\-]+)?(?:'s)?)\s+(?:stats|statistics|performance|numbers|averages)"),
    re.compile(r"how\s+(?:is|was|did)\s+(.+?)\s+(?:playing|doing|perform)"),
]

RECAP_RE = re.compile(r"\b(?:recap|summary|how did|what happened|results?|highlights)\b")
GAMES_RE = re.compile(r"\b(?:scores?|live|playing tonight|tonight|games?|schedules?|playing|today)\b")
LIVE_RE = re.compile(r"\blive\b")
LEADERS_RE = re.compile(r"\b(?:leaders?|leads|mvp|top scorers?|best)\b")

LEADER_CATEGORIES = [
    (re.compile(r"\brebound"), "rebounds"),
    (re.compile(r"\bassist"), "assists"),
    (re.compile(r"\bsteal"), "steals"),
    (re.compile(r"\bblock"), "blocks"),
]


def _clean_name(raw: str) -> str:
    name = re.sub(r"[?!.,]", "", raw).strip()
    name = _NAME_PREFIX_RE.sub("", name)
    name = _NAME_SUFFIX_RE.sub("", name)
    name = re.sub(r"'s$", "", name)
    return name.strip()


def _comparable(name: str) -> bool:
    """A captured side names a player or team, not a topic like "score" or "standings"."""
    if not name:
        return False
    return lookup_player(name) is not None or not _NON_PLAYER_RE.search(name)


# --- Rules ---

def comparison_rule(text: str, today: date) -> ComparisonIntent | None:
    for pattern in COMPARISON_PATTERNS:
        m = pattern.search(text)
        if not m:
            continue
        first, second = _clean_name(m.group(1)), _clean_name(m.group(2))
        if not (_comparable(first) and _comparable(second)):
            continue
        return ComparisonIntent(
            player1=resolve_alias(first.title()),
            player2=resolve_alias(second.title()),
        )
    return None


def standings_rule(text: str, today: date) -> StandingsIntent | None:
    if not STANDINGS_RE.search(text):
        return None
    if EAST_RE.search(text):
        return StandingsIntent(conference="east")
    if WEST_RE.search(text):
        return StandingsIntent(conference="west")
    return StandingsIntent()


def player_query_rule(text: str, today: date) -> PlayerIntent | None:
    for pattern in PLAYER_QUERY_PATTERNS:
        m = pattern.search(text)
        if not m:
            continue
        name = lookup_player(_clean_name(m.group(1)))
        if name:
            return PlayerIntent(name=name)
    return None


def alias_rule(text: str, today: date) -> PlayerIntent | None:
    name = find_alias_in_message(text)
    return PlayerIntent(name=name) if name else None


def fuzzy_rule(text: str, today: date) -> PlayerIntent | None:
    name = fuzzy_scan(text)
    return PlayerIntent(name=name) if name else None


def recap_rule(text: str, today: date) -> GameRecapIntent | None:
    team = find_team(text)
    if team is None:
        return None
    when = resolve_date(text, today)
    if when is None:
        if not RECAP_RE.search(text):
            return None
        return GameRecapIntent(
            team=team.name,
            team_abbreviation=team.abbreviation,
            date=today,
            date_str=to_date_str(today),
            date_display="Today",
        )
    return GameRecapIntent(
        team=team.name,
        team_abbreviation=team.abbreviation,
        date=when.date,
        date_str=when.date_str,
        date_display=when.display,
    )


def games_rule(text: str, today: date) -> GamesIntent | None:
    when = resolve_date(text, today)
    if not GAMES_RE.search(text) and when is None:
        return None
    team = find_team(text)
    if team:
        return GamesIntent(filter="team", team=team.abbreviation)
    if LIVE_RE.search(text):
        return GamesIntent(filter="live")
    if when:
        return GamesIntent(filter="date", date_str=when.date_str, date_display=when.display)
    return GamesIntent()


def team_rule(text: str, today: date) -> TeamIntent | None:
    team = find_team(text)
    return TeamIntent(name=team.name) if team else None


def leaders_rule(text: str, today: date) -> LeadersIntent | None:
    if not LEADERS_RE.search(text):
        return None
    for pattern, category in LEADER_CATEGORIES:
        if pattern.search(text):
            return LeadersIntent(category=category)
    return LeadersIntent()


def general_rule(text: str, today: date) -> GeneralIntent:
    return GeneralIntent()


RULES: list[tuple[str, Rule]] = [
    ("comparison", comparison_rule),
    ("standings", standings_rule),
    ("player_query", player_query_rule),
    ("alias", alias_rule),
    ("fuzzy", fuzzy_rule),
    ("game_recap", recap_rule),
    ("games", games_rule),
    ("team", team_rule),
    ("leaders", leaders_rule),
    ("general", general_rule),
]


def classify_intent(message: str, today: date | None = None) -> UserIntent:
    """Classify a chat message into exactly one intent."""
    today = today or date.today()
    text = message.lower().strip()
    for rule_name, rule in RULES:
        intent = rule(text, today)
        if intent is not None:
            logger.info("[intent] %s -> %s", rule_name, intent.model_dump(exclude_none=True))
            return intent
    return GeneralIntent()
