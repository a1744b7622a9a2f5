"""Pure parsers from ESPN JSON into the service's models.

ESPN payloads are loosely shaped and vary by endpoint and season. Each
parser documents the fields it reads and the order in which fallbacks are
tried. Parsers never raise on missing keys; they raise UpstreamDataError only
when the top-level shape is unusable.
"""

from __future__ import annotations

from config import ESPN_HEADSHOT_URL, logo_url
from errors import UpstreamDataError
from models import (
    Boxscore,
    LiveGameSnapshot,
    PlayerLine,
    PlayerSearchHit,
    PlayerSeasonStats,
    Standings,
    StandingsEntry,
    TeamLine,
)
from utils import as_float, as_int, clamp

# --- Scoreboard ---


def map_status(status: dict) -> str:
    """status.type.state: pre -> scheduled, in -> live (or halftime), post -> final."""
    st = status.get("type") or {}
    state = st.get("state", "pre")
    if state == "post" or st.get("completed"):
        return "final"
    if state == "in":
        if st.get("name") == "STATUS_HALFTIME":
            return "halftime"
        return "live"
    return "scheduled"


def _team_line(competitor: dict) -> TeamLine:
    team = competitor.get("team") or {}
    abbr = team.get("abbreviation", "")
    records = competitor.get("records") or []
    return TeamLine(
        name=team.get("displayName") or team.get("name") or abbr,
        abbreviation=abbr,
        # team.logo on the scoreboard, team.logos[0].href on other endpoints
        logo=team.get("logo") or ((team.get("logos") or [{}])[0].get("href")) or logo_url(abbr),
        score=as_int(competitor.get("score")),
        record=records[0].get("summary") if records else None,
    )


def parse_game(event: dict) -> LiveGameSnapshot | None:
    """One scoreboard event. Returns None when it lacks two competitors."""
    competitions = event.get("competitions") or []
    if not competitions:
        return None
    comp = competitions[0]
    competitors = comp.get("competitors") or []
    home = next((c for c in competitors if c.get("homeAway") == "home"), None)
    away = next((c for c in competitors if c.get("homeAway") == "away"), None)
    if home is None or away is None:
        return None

    # status lives on the competition on newer payloads, on the event on older ones
    status = comp.get("status") or event.get("status") or {}
    broadcasts = comp.get("broadcasts") or []
    broadcast = None
    if broadcasts:
        names = broadcasts[0].get("names") or []
        broadcast = names[0] if names else None

    return LiveGameSnapshot(
        game_id=str(event.get("id", "")),
        home_team=_team_line(home),
        away_team=_team_line(away),
        status=map_status(status),
        period=status.get("period"),
        clock=status.get("displayClock"),
        venue=(comp.get("venue") or {}).get("fullName"),
        broadcast=broadcast,
        game_date=event.get("date"),
    )


def parse_scoreboard(data: dict) -> list[LiveGameSnapshot]:
    if not isinstance(data, dict) or "events" not in data:
        raise UpstreamDataError("scoreboard payload has no events")
    games = []
    for event in data["events"] or []:
        game = parse_game(event)
        if game:
            games.append(game)
    return games


# --- Boxscore ---

# label -> PlayerLine field, for the "made-attempted" pairs split below
_PAIR_LABELS = {"FG": ("fgm", "fga"), "3PT": ("fg3m", "fg3a"), "FT": ("ftm", "fta")}
_INT_LABELS = {
    "PTS": "points", "REB": "rebounds", "AST": "assists",
    "STL": "steals", "BLK": "blocks", "TO": "turnovers",
}
# Some seasons send only `keys`; map them onto the same labels.
_KEY_TO_LABEL = {
    "minutes": "MIN",
    "fieldGoalsMade-fieldGoalsAttempted": "FG",
    "threePointFieldGoalsMade-threePointFieldGoalsAttempted": "3PT",
    "freeThrowsMade-freeThrowsAttempted": "FT",
    "rebounds": "REB", "assists": "AST", "steals": "STL", "blocks": "BLK",
    "turnovers": "TO", "plusMinus": "+/-", "points": "PTS",
}


def _labels(group: dict) -> list[str]:
    labels = group.get("labels")
    if labels:
        return [str(l).upper() for l in labels]
    return [_KEY_TO_LABEL.get(k, k) for k in group.get("keys") or []]


def _player_line(entry: dict, labels: list[str]) -> PlayerLine | None:
    athlete = entry.get("athlete") or {}
    stats = entry.get("stats") or []
    if entry.get("didNotPlay") or not stats:
        return None
    values = dict(zip(labels, stats))
    fields: dict = {}
    for label, (made, attempted) in _PAIR_LABELS.items():
        m, _, a = str(values.get(label, "0-0")).partition("-")
        fields[made], fields[attempted] = as_int(m), as_int(a)
    for label, field in _INT_LABELS.items():
        fields[field] = as_int(values.get(label))
    player_id = str(athlete.get("id", ""))
    return PlayerLine(
        player_id=player_id,
        name=athlete.get("displayName") or athlete.get("shortName") or "Unknown",
        headshot=(athlete.get("headshot") or {}).get("href")
        or (ESPN_HEADSHOT_URL.format(player_id=player_id) if player_id else ""),
        starter=bool(entry.get("starter")),
        minutes=str(values.get("MIN") or "0"),
        plus_minus=str(values.get("+/-") or "0"),
        **fields,
    )


def _team_players(group: dict) -> list[PlayerLine]:
    statistics = group.get("statistics") or []
    if not statistics:
        return []
    block = statistics[0]
    labels = _labels(block)
    players = []
    for entry in block.get("athletes") or []:
        line = _player_line(entry, labels)
        if line:
            players.append(line)
    return players


def parse_boxscore(game_id: str, data: dict) -> Boxscore:
    """ESPN summary payload: header.competitions[0] for teams and score,
    boxscore.players[] for per-player lines keyed by team id."""
    if not isinstance(data, dict) or "boxscore" not in data:
        raise UpstreamDataError(f"summary for {game_id} has no boxscore")

    comp = ((data.get("header") or {}).get("competitions") or [{}])[0]
    by_side = {c.get("homeAway"): c for c in comp.get("competitors") or []}
    home = by_side.get("home") or {}
    away = by_side.get("away") or {}
    home_id = str((home.get("team") or {}).get("id", ""))

    home_players: list[PlayerLine] = []
    away_players: list[PlayerLine] = []
    groups = (data.get("boxscore") or {}).get("players") or []
    for i, group in enumerate(groups):
        team_id = str((group.get("team") or {}).get("id", ""))
        # without team ids, ESPN lists the away side first
        is_home = team_id == home_id if (team_id and home_id) else i == 1
        if is_home:
            home_players = _team_players(group)
        else:
            away_players = _team_players(group)

    return Boxscore(
        game_id=str(game_id),
        home_team=(home.get("team") or {}).get("displayName", ""),
        away_team=(away.get("team") or {}).get("displayName", ""),
        home_score=as_int(home.get("score")),
        away_score=as_int(away.get("score")),
        status=map_status(comp.get("status") or {}),
        home_players=home_players,
        away_players=away_players,
    )


# --- Standings ---

def _stat_map(stats: list[dict]) -> dict[str, dict]:
    # entries carry both `name` and `type`; older payloads only `name`
    out = {}
    for s in stats or []:
        key = s.get("name") or s.get("type")
        if key:
            out[key] = s
    return out


def _entry(raw: dict) -> StandingsEntry:
    team = raw.get("team") or {}
    stats = _stat_map(raw.get("stats"))
    abbr = team.get("abbreviation", "")

    def value(name: str, default=0.0):
        return (stats.get(name) or {}).get("value", default)

    gb = stats.get("gamesBehind")
    streak = stats.get("streak")
    return StandingsEntry(
        name=team.get("displayName", abbr),
        abbreviation=abbr,
        logo=((team.get("logos") or [{}])[0].get("href")) or logo_url(abbr),
        wins=as_int(value("wins")),
        losses=as_int(value("losses")),
        win_pct=(stats.get("winPercent") or {}).get("displayValue") or f"{as_float(value('winPercent')):.3f}",
        games_behind=as_float(gb.get("value")) if gb and gb.get("value") is not None else None,
        streak=streak.get("displayValue") if streak else None,
    )


def parse_standings(data: dict) -> Standings:
    """children[] holds one group per conference. Entries keep the provider's
    order, which is the ranking shown to users."""
    if not isinstance(data, dict) or not data.get("children"):
        raise UpstreamDataError("standings payload has no conference groups")
    standings = Standings()
    for child in data["children"]:
        label = f"{child.get('abbreviation', '')} {child.get('name', '')}".lower()
        entries = [_entry(e) for e in (child.get("standings") or {}).get("entries") or []]
        if "east" in label:
            standings.east = entries
        elif "west" in label:
            standings.west = entries
    return standings


# --- Players ---

def _is_nba(item: dict) -> bool:
    league = item.get("league")
    if isinstance(league, dict):
        league = league.get("abbreviation", "")
    return str(league or "").lower() == "nba" or item.get("defaultLeagueSlug") == "nba"


def _hit(item: dict, fallback_name: str) -> PlayerSearchHit:
    rels = item.get("teamRelationships") or []
    rel = rels[0] if rels else {}
    team = rel.get("core") or item.get("team") or {}
    abbr = team.get("abbreviation", "")
    return PlayerSearchHit(
        id=str(item.get("id", "")),
        name=item.get("displayName") or fallback_name,
        team=team.get("displayName") or rel.get("displayName") or "Unknown",
        team_logo=((team.get("logos") or [{}])[0].get("href")) or logo_url(abbr or "nba"),
        position=item.get("position") or "N/A",
    )


def pick_player(data: dict, query: str) -> PlayerSearchHit | None:
    """Two passes over search items: NBA players first, then any basketball
    player. No match is 'not found', not an error."""
    if not isinstance(data, dict):
        raise UpstreamDataError("search payload is not an object")
    items = data.get("items") or data.get("results") or []
    players = [i for i in items if i.get("type") == "player"]
    for item in players:
        if _is_nba(item):
            return _hit(item, query)
    for item in players:
        if item.get("sport") == "basketball":
            return _hit(item, query)
    return None


# ESPN stat names -> PlayerSeasonStats field, with label fallbacks
_SEASON_FIELDS = {
    "ppg": ("avgPoints", "PTS"),
    "rpg": ("avgRebounds", "REB"),
    "apg": ("avgAssists", "AST"),
    "spg": ("avgSteals", "STL"),
    "bpg": ("avgBlocks", "BLK"),
    "fg_pct": ("fieldGoalPct", "FG%"),
    "fg3_pct": ("threePointFieldGoalPct", "3P%"),
    "ft_pct": ("freeThrowPct", "FT%"),
    "mpg": ("avgMinutes", "MIN"),
    "games_played": ("gamesPlayed", "GP"),
}

SEASON_LIMITS = {
    "ppg": 100, "rpg": 30, "apg": 20, "spg": 5, "bpg": 5, "mpg": 48,
    "games_played": 100, "fg_pct": 100, "fg3_pct": 100, "ft_pct": 100,
}


def clamp_season_stats(stats: PlayerSeasonStats) -> PlayerSeasonStats:
    """Clamp averages to plausible ranges; bad provider rows show up as 0 or the cap."""
    updates = {}
    for field, high in SEASON_LIMITS.items():
        updates[field] = clamp(getattr(stats, field) or 0, 0, high)
    updates["games_played"] = int(updates["games_played"])
    return stats.model_copy(update=updates)


def _regular_season_split(splits: list[dict]) -> dict | None:
    for split in splits:
        if "regular" in str(split.get("displayName", "")).lower():
            return split
    return splits[0] if splits else None


def parse_player_stats(player_id: str, data: dict) -> PlayerSeasonStats | None:
    """Athlete overview: statistics.names/labels line up with splits[].stats.
    Returns None when the player has no season split."""
    if not isinstance(data, dict):
        raise UpstreamDataError(f"overview for {player_id} is not an object")
    block = data.get("statistics") or {}
    split = _regular_season_split(block.get("splits") or [])
    if not split:
        return None

    names = block.get("names") or []
    labels = [str(l).upper() for l in block.get("labels") or []]
    values = split.get("stats") or []
    by_name = dict(zip(names, values))
    by_label = dict(zip(labels, values))

    fields = {}
    for field, (name, label) in _SEASON_FIELDS.items():
        raw = by_name.get(name, by_label.get(label))
        fields[field] = as_float(str(raw).replace(",", "")) if raw is not None else 0.0
    fields["games_played"] = int(fields["games_played"])

    athlete = data.get("athlete") or {}
    stats = PlayerSeasonStats(
        **fields,
        headshot=(athlete.get("headshot") or {}).get("href") or ESPN_HEADSHOT_URL.format(player_id=player_id),
        position=(athlete.get("position") or {}).get("abbreviation"),
        jersey=athlete.get("jersey"),
    )
    return clamp_season_stats(stats)
