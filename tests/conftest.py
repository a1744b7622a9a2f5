"""Shared fixtures and ESPN payload builders."""

from datetime import date

import pytest

from cache import cache

TODAY = date(2025, 1, 15)


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def today():
    return TODAY


def competitor(side, name, abbr, score="0", team_id="1", record="10-5"):
    return {
        "homeAway": side,
        "score": score,
        "team": {"id": team_id, "displayName": name, "abbreviation": abbr, "logo": f"logo/{abbr}"},
        "records": [{"summary": record}],
    }


def event(game_id, home, away, state="post", name="STATUS_FINAL", period=4, clock="0.0"):
    return {
        "id": game_id,
        "date": "2025-01-15T00:30Z",
        "competitions": [{
            "competitors": [home, away],
            "status": {"period": period, "displayClock": clock, "type": {"state": state, "name": name}},
            "venue": {"fullName": "Crypto.com Arena"},
            "broadcasts": [{"names": ["ESPN"]}],
        }],
    }


BOX_LABELS = ["MIN", "FG", "3PT", "FT", "OREB", "DREB", "REB", "AST", "STL", "BLK", "TO", "PF", "+/-", "PTS"]


def athlete(player_id, name, pts, reb=5, ast=5, minutes="30", starter=True):
    return {
        "athlete": {"id": player_id, "displayName": name, "headshot": {"href": f"head/{player_id}"}},
        "starter": starter,
        "didNotPlay": False,
        "stats": [minutes, "10-20", "2-6", "4-5", "1", "4", str(reb), str(ast), "1", "0", "2", "3", "+7", str(pts)],
    }


def summary(home_id, away_id, home_players, away_players, home_score="110", away_score="100"):
    return {
        "header": {"competitions": [{
            "competitors": [
                {"homeAway": "home", "score": home_score, "team": {"id": home_id, "displayName": "Home Team"}},
                {"homeAway": "away", "score": away_score, "team": {"id": away_id, "displayName": "Away Team"}},
            ],
            "status": {"type": {"state": "post"}},
        }]},
        "boxscore": {"players": [
            {"team": {"id": away_id}, "statistics": [{"labels": BOX_LABELS, "athletes": away_players}]},
            {"team": {"id": home_id}, "statistics": [{"labels": BOX_LABELS, "athletes": home_players}]},
        ]},
    }
