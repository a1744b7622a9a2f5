"""ESPN public API adapters: fetchers plus the pure parsers in normalize."""

from espn.boxscores import fetch_all_boxscores, fetch_game_boxscore
from espn.players import fetch_player_profile, fetch_player_season_stats, search_player
from espn.scoreboard import fetch_live_scores, fetch_scores_by_date
from espn.standings import fetch_standings

__all__ = [
    "fetch_all_boxscores",
    "fetch_game_boxscore",
    "fetch_live_scores",
    "fetch_player_profile",
    "fetch_player_season_stats",
    "fetch_scores_by_date",
    "fetch_standings",
    "search_player",
]
