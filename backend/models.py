from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request / response ---

Personality = Literal["default", "hype", "drunk", "announcer", "analyst"]
Length = Literal["short", "medium", "long"]
GameStatus = Literal["scheduled", "live", "halftime", "final"]


class GameContext(CamelModel):
    home_team: str = ""
    away_team: str = ""
    home_score: int | None = None
    away_score: int | None = None
    period: int | None = None
    game_clock: str | None = None
    status: str | None = None


class ChatRequest(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    message: str
    personality: Personality = "default"
    length: Length = "medium"
    kind: Literal["general", "game"] = "general"
    request_visuals: bool = True
    game_context: GameContext | None = None

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message is required")
        return v


class ErrorResponse(CamelModel):
    response: str
    error: str
    source_url: str | None = None


# --- Reference data ---

class Team(CamelModel):
    id: str
    name: str
    abbreviation: str
    logo: str


# --- Provider data (normalized) ---

class TeamLine(CamelModel):
    name: str
    abbreviation: str
    logo: str = ""
    score: int = 0
    record: str | None = None


class LiveGameSnapshot(CamelModel):
    game_id: str
    home_team: TeamLine
    away_team: TeamLine
    status: GameStatus
    period: int | None = None
    clock: str | None = None
    venue: str | None = None
    broadcast: str | None = None
    game_date: str | None = None


class PlayerLine(CamelModel):
    player_id: str = ""
    name: str
    headshot: str = ""
    starter: bool = False
    minutes: str = "0"
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fgm: int = 0
    fga: int = 0
    fg3m: int = Field(0, alias="fg3m")
    fg3a: int = Field(0, alias="fg3a")
    ftm: int = 0
    fta: int = 0
    plus_minus: str = "0"


class Boxscore(CamelModel):
    game_id: str
    home_team: str
    away_team: str
    home_score: int = 0
    away_score: int = 0
    status: GameStatus = "scheduled"
    home_players: list[PlayerLine] = Field(default_factory=list)
    away_players: list[PlayerLine] = Field(default_factory=list)


class StandingsEntry(CamelModel):
    name: str
    abbreviation: str
    logo: str = ""
    wins: int = 0
    losses: int = 0
    win_pct: str = ".000"
    games_behind: float | None = None
    streak: str | None = None


class Standings(CamelModel):
    east: list[StandingsEntry] = Field(default_factory=list)
    west: list[StandingsEntry] = Field(default_factory=list)


class PlayerSearchHit(CamelModel):
    id: str
    name: str
    team: str = "Unknown"
    team_logo: str = ""
    position: str = "N/A"


class PlayerSeasonStats(CamelModel):
    ppg: float = 0.0
    rpg: float = 0.0
    apg: float = 0.0
    spg: float = 0.0
    bpg: float = 0.0
    fg_pct: float = 0.0
    fg3_pct: float = 0.0
    ft_pct: float = 0.0
    mpg: float = 0.0
    games_played: int = 0
    headshot: str | None = None
    position: str | None = None
    jersey: str | None = None


class PlayerProfile(CamelModel):
    """A search hit joined with its season stats (stats may be missing)."""
    hit: PlayerSearchHit
    stats: PlayerSeasonStats | None = None


# --- Visual payloads ---

class VisualGame(CamelModel):
    game_id: str
    home_team: TeamLine
    away_team: TeamLine
    status: GameStatus
    period: int | None = None
    clock: str | None = None
    venue: str | None = None
    broadcast: str | None = None


class GameLine(CamelModel):
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    minutes: str = "0"
    fgm: int = 0
    fga: int = 0
    fg3m: int = Field(0, alias="fg3m")
    fg3a: int = Field(0, alias="fg3a")


class VisualPlayer(CamelModel):
    id: str = ""
    name: str
    team: str = "Unknown"
    team_logo: str = ""
    headshot: str = ""
    position: str = ""
    number: str | None = None
    stats: PlayerSeasonStats = Field(default_factory=PlayerSeasonStats)
    game_stats: GameLine | None = None


class ComparisonCategory(CamelModel):
    name: str
    player1_value: str
    player2_value: str
    winner: Literal["player1", "player2", "tie"]


class PlayerComparison(CamelModel):
    player1: VisualPlayer
    player2: VisualPlayer
    verdict: str = ""
    categories: list[ComparisonCategory]


class StandingsRow(CamelModel):
    rank: int
    name: str
    abbreviation: str
    logo: str = ""
    wins: int
    losses: int
    win_pct: str
    games_behind: str
    streak: str | None = None
    is_playoff: bool = False
    is_play_in: bool = False


class ConferenceStandings(CamelModel):
    conference: Literal["East", "West"]
    teams: list[StandingsRow]


class RecapPlayer(CamelModel):
    name: str
    headshot: str = ""
    minutes: str = "0"
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    fgm: int = 0
    fga: int = 0
    fg3m: int = Field(0, alias="fg3m")
    fg3a: int = Field(0, alias="fg3a")
    plus_minus: str = "0"


class RecapTotals(CamelModel):
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fgm: int = 0
    fga: int = 0
    fg3m: int = Field(0, alias="fg3m")
    fg3a: int = Field(0, alias="fg3a")
    ftm: int = 0
    fta: int = 0


class RecapTeam(TeamLine):
    top_players: list[RecapPlayer] = Field(default_factory=list)


class GameRecap(CamelModel):
    game_id: str
    home_team: RecapTeam
    away_team: RecapTeam
    home_totals: RecapTotals = Field(default_factory=RecapTotals)
    away_totals: RecapTotals = Field(default_factory=RecapTotals)
    status: GameStatus
    venue: str | None = None
    broadcast: str | None = None
    date: str | None = None


class LeaderRow(CamelModel):
    rank: int
    name: str
    team: str
    team_logo: str = ""
    headshot: str = ""
    value: int


class LeadersTable(CamelModel):
    category: str
    players: list[LeaderRow]


class TeamCard(CamelModel):
    team: Team
    rank: int | None = None
    conference: Literal["East", "West"] | None = None
    record: str | None = None
    streak: str | None = None
    games: list[VisualGame] = Field(default_factory=list)


class GamesVisual(CamelModel):
    type: Literal["games"] = "games"
    data: list[VisualGame]
    date_display: str | None = None


class GameRecapVisual(CamelModel):
    type: Literal["game_recap"] = "game_recap"
    data: GameRecap


class PlayerVisual(CamelModel):
    type: Literal["player"] = "player"
    data: VisualPlayer


class ComparisonVisual(CamelModel):
    type: Literal["comparison"] = "comparison"
    data: PlayerComparison


class StandingsVisual(CamelModel):
    type: Literal["standings"] = "standings"
    data: list[ConferenceStandings]


class LeadersVisual(CamelModel):
    type: Literal["leaders"] = "leaders"
    data: LeadersTable


class TeamVisual(CamelModel):
    type: Literal["team"] = "team"
    data: TeamCard


VisualPayload = Annotated[
    Union[
        GamesVisual, GameRecapVisual, PlayerVisual, ComparisonVisual,
        StandingsVisual, LeadersVisual, TeamVisual,
    ],
    Field(discriminator="type"),
]


class ChatResponse(CamelModel):
    response: str
    visual: VisualPayload | None = None
    model: str
    personality: Personality
    length: Length
    intent: str
    data_source: str
    data_timestamp: str
    games_count: int = 0
