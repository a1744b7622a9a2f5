"""Tests for the ESPN payload parsers."""

import pytest

from errors import UpstreamDataError
from espn.normalize import (
    clamp_season_stats,
    map_status,
    parse_boxscore,
    parse_scoreboard,
    parse_player_stats,
    parse_standings,
    pick_player,
)
from models import PlayerSeasonStats

from conftest import athlete, competitor, event, summary


# ── scoreboard ─────────────────────────────────────────────


def test_map_status():
    assert map_status({"type": {"state": "pre"}}) == "scheduled"
    assert map_status({"type": {"state": "in", "name": "STATUS_IN_PROGRESS"}}) == "live"
    assert map_status({"type": {"state": "in", "name": "STATUS_HALFTIME"}}) == "halftime"
    assert map_status({"type": {"state": "post"}}) == "final"
    assert map_status({}) == "scheduled"


def test_parse_scoreboard():
    data = {"events": [event(
        "401",
        competitor("home", "Los Angeles Lakers", "LAL", "112", "13"),
        competitor("away", "Boston Celtics", "BOS", "108", "2"),
        state="in", name="STATUS_IN_PROGRESS", period=3, clock="4:12",
    )]}
    games = parse_scoreboard(data)
    assert len(games) == 1
    g = games[0]
    assert g.game_id == "401"
    assert g.home_team.abbreviation == "LAL"
    assert g.home_team.score == 112
    assert g.away_team.record == "10-5"
    assert g.status == "live"
    assert g.period == 3
    assert g.clock == "4:12"
    assert g.venue == "Crypto.com Arena"
    assert g.broadcast == "ESPN"


def test_parse_scoreboard_skips_incomplete_events():
    data = {"events": [{"id": "1", "competitions": [{"competitors": []}]}, {"id": "2"}]}
    assert parse_scoreboard(data) == []


def test_parse_scoreboard_rejects_bad_payload():
    with pytest.raises(UpstreamDataError):
        parse_scoreboard({"message": "not found"})
    with pytest.raises(UpstreamDataError):
        parse_scoreboard([])


# ── boxscore ───────────────────────────────────────────────


def test_parse_boxscore_assigns_sides_by_team_id():
    data = summary(
        "13", "2",
        home_players=[athlete("1", "LeBron James", 30)],
        away_players=[athlete("2", "Jayson Tatum", 25)],
    )
    box = parse_boxscore("401", data)
    assert box.home_score == 110
    assert box.status == "final"
    assert [p.name for p in box.home_players] == ["LeBron James"]
    assert [p.name for p in box.away_players] == ["Jayson Tatum"]

    p = box.home_players[0]
    assert (p.points, p.rebounds, p.assists) == (30, 5, 5)
    assert (p.fgm, p.fga, p.fg3m, p.fg3a, p.ftm, p.fta) == (10, 20, 2, 6, 4, 5)
    assert p.plus_minus == "+7"
    assert p.minutes == "30"
    assert p.headshot == "head/1"


def test_parse_boxscore_skips_did_not_play():
    dnp = {"athlete": {"id": "9", "displayName": "Bench Guy"}, "didNotPlay": True, "stats": []}
    data = summary("13", "2", home_players=[dnp], away_players=[])
    assert parse_boxscore("401", data).home_players == []


def test_parse_boxscore_requires_boxscore():
    with pytest.raises(UpstreamDataError):
        parse_boxscore("401", {"header": {}})


# ── standings ──────────────────────────────────────────────


def _standing(abbr, wins, losses, seed=None, gb=None):
    stats = [
        {"name": "wins", "value": wins},
        {"name": "losses", "value": losses},
        {"name": "winPercent", "value": wins / (wins + losses), "displayValue": f"{wins / (wins + losses):.3f}"[1:]},
        {"name": "streak", "displayValue": "W3"},
    ]
    if seed is not None:
        stats.append({"name": "playoffSeed", "value": seed})
    if gb is not None:
        stats.append({"name": "gamesBehind", "value": gb})
    return {"team": {"displayName": abbr, "abbreviation": abbr, "logos": [{"href": f"logo/{abbr}"}]}, "stats": stats}


def test_parse_standings_keeps_provider_order():
    data = {"children": [
        {"name": "Eastern Conference", "abbreviation": "East", "standings": {"entries": [
            _standing("NYK", 30, 12, seed=2), _standing("BOS", 32, 10, seed=1),
        ]}},
        {"name": "Western Conference", "abbreviation": "West", "standings": {"entries": [
            _standing("OKC", 35, 7, seed=1, gb=0),
        ]}},
    ]}
    s = parse_standings(data)
    assert [e.abbreviation for e in s.east] == ["NYK", "BOS"]
    assert s.east[1].win_pct == ".762"
    assert s.east[1].games_behind is None
    assert s.east[1].streak == "W3"
    assert s.west[0].games_behind == 0.0
    assert s.west[0].logo == "logo/OKC"


def test_parse_standings_requires_children():
    with pytest.raises(UpstreamDataError):
        parse_standings({})


# ── players ────────────────────────────────────────────────


def test_pick_player_prefers_nba():
    data = {"items": [
        {"type": "player", "id": "1", "displayName": "LeBron James Jr", "sport": "basketball", "league": "ncaam"},
        {"type": "player", "id": "1966", "displayName": "LeBron James", "league": "nba",
         "teamRelationships": [{"core": {"displayName": "Los Angeles Lakers", "abbreviation": "LAL"}}]},
    ]}
    hit = pick_player(data, "lebron")
    assert hit.id == "1966"
    assert hit.team == "Los Angeles Lakers"
    assert hit.team_logo.endswith("/lal.png")


def test_pick_player_falls_back_to_any_basketball_player():
    data = {"items": [
        {"type": "team", "id": "13", "displayName": "Lakers"},
        {"type": "player", "id": "5", "displayName": "Some Guard", "sport": "basketball", "league": "wnba"},
    ]}
    hit = pick_player(data, "guard")
    assert hit.id == "5"
    assert hit.team == "Unknown"


def test_pick_player_not_found_is_none():
    assert pick_player({"items": [{"type": "player", "sport": "football", "id": "3"}]}, "x") is None
    assert pick_player({}, "x") is None


def test_parse_player_stats_by_name():
    data = {
        "statistics": {
            "labels": ["GP", "MIN", "PTS", "REB", "AST", "STL", "BLK", "FG%", "3P%", "FT%"],
            "names": ["gamesPlayed", "avgMinutes", "avgPoints", "avgRebounds", "avgAssists",
                      "avgSteals", "avgBlocks", "fieldGoalPct", "threePointFieldGoalPct", "freeThrowPct"],
            "splits": [
                {"displayName": "Regular Season", "stats": ["40", "35.1", "24.8", "7.9", "8.7", "1.3", "0.6", "51.26", "39.0", "74.8"]},
                {"displayName": "Career", "stats": ["1500", "38", "27", "7.5", "7.4", "1.5", "0.7", "50.6", "34.9", "73.6"]},
            ],
        },
        "athlete": {"position": {"abbreviation": "F"}, "jersey": "23"},
    }
    s = parse_player_stats("1966", data)
    assert s.ppg == 24.8
    assert s.games_played == 40
    assert s.fg_pct == 51.26
    assert s.position == "F"
    assert s.jersey == "23"
    assert "1966" in s.headshot


def test_parse_player_stats_without_splits():
    assert parse_player_stats("1", {"statistics": {}}) is None


def test_clamp_season_stats():
    s = clamp_season_stats(PlayerSeasonStats(ppg=250, rpg=-3, fg_pct=140, games_played=120))
    assert s.ppg == 100
    assert s.rpg == 0
    assert s.fg_pct == 100
    assert s.games_played == 100
