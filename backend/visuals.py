"""Shape gathered data into the typed visual payload for each intent."""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

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
from matching import fold, lookup_team
from models import (
    Boxscore,
    ComparisonCategory,
    ComparisonVisual,
    ConferenceStandings,
    GameLine,
    GameRecap,
    GameRecapVisual,
    GamesVisual,
    LeaderRow,
    LeadersTable,
    LeadersVisual,
    LiveGameSnapshot,
    PlayerComparison,
    PlayerLine,
    PlayerProfile,
    PlayerSeasonStats,
    PlayerVisual,
    RecapPlayer,
    RecapTeam,
    RecapTotals,
    StandingsEntry,
    StandingsRow,
    StandingsVisual,
    TeamCard,
    TeamLine,
    TeamVisual,
    VisualGame,
    VisualPayload,
    VisualPlayer,
)

if TYPE_CHECKING:
    from gather import DataBundle

logger = logging.getLogger(__name__)

PLAYOFF_CUTOFF = 6
PLAY_IN_CUTOFF = 10
TOP_SCORERS = 3
LEADERS_LIMIT = 10

# (label, stat field, is percentage)
COMPARISON_CATEGORIES = [
    ("PPG", "ppg", False),
    ("RPG", "rpg", False),
    ("APG", "apg", False),
    ("SPG", "spg", False),
    ("BPG", "bpg", False),
    ("FG%", "fg_pct", True),
    ("3P%", "fg3_pct", True),
    ("FT%", "ft_pct", True),
]


def normalize_pct(value: float) -> float:
    """Percentages arrive as 51.26 or 0.5126. Anything above 1 is already scaled."""
    value = value or 0.0
    return round(value if value > 1 else value * 100, 4)


PCT_FIELDS = ("fg_pct", "fg3_pct", "ft_pct")


def normalize_season_pcts(stats: PlayerSeasonStats) -> PlayerSeasonStats:
    """Season stats with every shooting percentage on the 0-100 scale."""
    return stats.model_copy(update={f: normalize_pct(getattr(stats, f)) for f in PCT_FIELDS})


# --- games ---

def to_visual_game(game: LiveGameSnapshot) -> VisualGame:
    return VisualGame(**game.model_dump(exclude={"game_date"}))


def _filter_games(intent: GamesIntent, games: list[LiveGameSnapshot]) -> list[LiveGameSnapshot]:
    if intent.filter == "live":
        return [g for g in games if g.status in ("live", "halftime")]
    if intent.filter == "team" and intent.team:
        return [g for g in games if intent.team in (g.home_team.abbreviation, g.away_team.abbreviation)]
    return list(games)


def build_games(intent: GamesIntent, bundle: DataBundle) -> GamesVisual | None:
    games = _filter_games(intent, bundle.games)
    if not games:
        return None
    return GamesVisual(
        data=[to_visual_game(g) for g in games],
        date_display=intent.date_display or "Today",
    )


# --- standings ---

def format_games_behind(gb: float) -> str:
    if gb == 0:
        return "-"
    if float(gb).is_integer():
        return str(int(gb))
    return f"{gb:.1f}"


def rank_conference(entries: list[StandingsEntry]) -> list[StandingsRow]:
    """Rank 1..N in the given order; top 6 playoff, 7-10 play-in."""
    if not entries:
        return []
    leader = entries[0]
    rows = []
    for i, entry in enumerate(entries, 1):
        gb = entry.games_behind
        if gb is None:
            gb = ((leader.wins - entry.wins) + (entry.losses - leader.losses)) / 2
        rows.append(StandingsRow(
            rank=i,
            name=entry.name,
            abbreviation=entry.abbreviation,
            logo=entry.logo,
            wins=entry.wins,
            losses=entry.losses,
            win_pct=entry.win_pct,
            games_behind=format_games_behind(gb),
            streak=entry.streak,
            is_playoff=i <= PLAYOFF_CUTOFF,
            is_play_in=PLAYOFF_CUTOFF < i <= PLAY_IN_CUTOFF,
        ))
    return rows


def build_standings(intent: StandingsIntent, bundle: DataBundle) -> StandingsVisual | None:
    standings = bundle.standings
    if standings is None:
        return None
    tables = []
    if intent.conference in ("east", "both") and standings.east:
        tables.append(ConferenceStandings(conference="East", teams=rank_conference(standings.east)))
    if intent.conference in ("west", "both") and standings.west:
        tables.append(ConferenceStandings(conference="West", teams=rank_conference(standings.west)))
    if not tables:
        return None
    return StandingsVisual(data=tables)


# --- players ---

def find_player_line(name: str, boxscores: dict[str, Boxscore]) -> PlayerLine | None:
    target = fold(name)
    for box in boxscores.values():
        for line in box.home_players + box.away_players:
            if fold(line.name) == target:
                return line
    return None


def to_visual_player(name: str, profile: PlayerProfile | None) -> VisualPlayer:
    """Player card data, or a zeroed placeholder that keeps the requested name."""
    if profile is None:
        return VisualPlayer(name=name)
    hit = profile.hit
    stats = normalize_season_pcts(profile.stats or PlayerSeasonStats())
    return VisualPlayer(
        id=hit.id,
        name=hit.name,
        team=hit.team,
        team_logo=hit.team_logo,
        headshot=stats.headshot or "",
        position=stats.position or hit.position,
        number=stats.jersey,
        stats=stats,
    )


def build_player(intent: PlayerIntent, bundle: DataBundle) -> PlayerVisual:
    player = to_visual_player(intent.name, bundle.players.get(intent.name))
    line = find_player_line(player.name, bundle.boxscores)
    if line:
        player.game_stats = GameLine(**line.model_dump(include=set(GameLine.model_fields)))
    return PlayerVisual(data=player)


def _display(value: float, is_pct: bool) -> str:
    return f"{value:.1f}%" if is_pct else f"{value:.1f}"


def compare_stats(p1: PlayerSeasonStats, p2: PlayerSeasonStats) -> list[ComparisonCategory]:
    categories = []
    for label, field, is_pct in COMPARISON_CATEGORIES:
        v1, v2 = getattr(p1, field) or 0.0, getattr(p2, field) or 0.0
        if is_pct:
            v1, v2 = normalize_pct(v1), normalize_pct(v2)
        if v1 > v2:
            winner = "player1"
        elif v2 > v1:
            winner = "player2"
        else:
            winner = "tie"
        categories.append(ComparisonCategory(
            name=label,
            player1_value=_display(v1, is_pct),
            player2_value=_display(v2, is_pct),
            winner=winner,
        ))
    return categories


def build_comparison(intent: ComparisonIntent, bundle: DataBundle) -> ComparisonVisual:
    p1 = to_visual_player(intent.player1, bundle.players.get(intent.player1))
    p2 = to_visual_player(intent.player2, bundle.players.get(intent.player2))
    return ComparisonVisual(data=PlayerComparison(
        player1=p1,
        player2=p2,
        categories=compare_stats(p1.stats, p2.stats),
    ))


# --- game recap ---

def _last_word(name: str) -> str:
    words = fold(name).split()
    return words[-1] if words else ""


def find_team_game(games: list[LiveGameSnapshot], team_name: str) -> LiveGameSnapshot | None:
    """Match on the last word of the full team name ("Los Angeles Lakers" -> "lakers").

    Compared word against word, so "nets" does not match "Hornets".
    """
    key = _last_word(team_name or "")
    if not key:
        return None
    for game in games:
        if key in (_last_word(game.home_team.name), _last_word(game.away_team.name)):
            return game
    return None


def _played(line: PlayerLine) -> bool:
    return line.minutes not in ("", "0", "00", "--", "0:00")


def top_scorers(players: list[PlayerLine], limit: int = TOP_SCORERS) -> list[RecapPlayer]:
    played = sorted((p for p in players if _played(p)), key=lambda p: p.points, reverse=True)
    fields = set(RecapPlayer.model_fields)
    return [RecapPlayer(**p.model_dump(include=fields)) for p in played[:limit]]


def team_totals(players: list[PlayerLine]) -> RecapTotals:
    totals = {f: 0 for f in RecapTotals.model_fields}
    for p in players:
        for f in totals:
            totals[f] += getattr(p, f)
    return RecapTotals(**totals)


def _recap_team(line: TeamLine, players: list[PlayerLine]) -> RecapTeam:
    return RecapTeam(**line.model_dump(), top_players=top_scorers(players))


def build_recap(intent: GameRecapIntent, bundle: DataBundle) -> GameRecapVisual | None:
    game = bundle.recap_game
    if game is None:
        return None
    box = bundle.recap_boxscore
    home_players = box.home_players if box else []
    away_players = box.away_players if box else []
    return GameRecapVisual(data=GameRecap(
        game_id=game.game_id,
        home_team=_recap_team(game.home_team, home_players),
        away_team=_recap_team(game.away_team, away_players),
        home_totals=team_totals(home_players),
        away_totals=team_totals(away_players),
        status=game.status,
        venue=game.venue,
        broadcast=game.broadcast,
        date=intent.date_display,
    ))


# --- leaders ---

def build_leaders(intent: LeadersIntent, bundle: DataBundle) -> LeadersVisual | None:
    rows: list[tuple[int, PlayerLine, str]] = []
    for box in bundle.boxscores.values():
        for team_name, players in ((box.home_team, box.home_players), (box.away_team, box.away_players)):
            for p in players:
                value = getattr(p, intent.category)
                if value > 0:
                    rows.append((value, p, team_name))
    if not rows:
        return None

    rows.sort(key=lambda r: r[0], reverse=True)
    leaders = []
    for rank, (value, p, team_name) in enumerate(rows[:LEADERS_LIMIT], 1):
        team = lookup_team(team_name)
        leaders.append(LeaderRow(
            rank=rank,
            name=p.name,
            team=team.abbreviation if team else team_name,
            team_logo=team.logo if team else "",
            headshot=p.headshot,
            value=value,
        ))
    return LeadersVisual(data=LeadersTable(category=intent.category, players=leaders))


# --- team ---

def build_team(intent: TeamIntent, bundle: DataBundle) -> TeamVisual | None:
    team = lookup_team(intent.name)
    if team is None:
        return None
    card = TeamCard(team=team)
    if bundle.standings:
        for conference, entries in (("East", bundle.standings.east), ("West", bundle.standings.west)):
            for rank, entry in enumerate(entries, 1):
                if entry.abbreviation == team.abbreviation:
                    card.rank = rank
                    card.conference = conference
                    card.record = f"{entry.wins}-{entry.losses}"
                    card.streak = entry.streak
    card.games = [
        to_visual_game(g) for g in bundle.games
        if team.abbreviation in (g.home_team.abbreviation, g.away_team.abbreviation)
    ]
    return TeamVisual(data=card)


BUILDERS = {
    "games": build_games,
    "standings": build_standings,
    "player": build_player,
    "comparison": build_comparison,
    "game_recap": build_recap,
    "leaders": build_leaders,
    "team": build_team,
}


def build_visual(intent: UserIntent, bundle: DataBundle) -> VisualPayload | None:
    """Visual payload whose type matches the intent, or None when there is nothing to show."""
    builder = BUILDERS.get(intent.type)
    if builder is None:
        return None
    visual = builder(intent, bundle)
    logger.info("[visual] %s -> %s", intent.type, visual.type if visual else None)
    return visual
