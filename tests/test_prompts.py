"""Tests for prompt composition."""

import pytest

from gather import DataBundle
from models import (
    Boxscore,
    ChatRequest,
    GameContext,
    GamesVisual,
    LiveGameSnapshot,
    PlayerLine,
    PlayerProfile,
    PlayerSearchHit,
    PlayerSeasonStats,
    TeamLine,
)
from prompts import build_live_context, compose_prompt, describe_visual

from conftest import TODAY


def _game(status="live"):
    return LiveGameSnapshot(
        game_id="401",
        home_team=TeamLine(name="Los Angeles Lakers", abbreviation="LAL", score=88),
        away_team=TeamLine(name="Boston Celtics", abbreviation="BOS", score=85),
        status=status, period=3, clock="4:12",
    )


def _request(**kw):
    return ChatRequest(message=kw.pop("message", "how are the lakers doing"), **kw)


# ── parameters ─────────────────────────────────────────────


@pytest.mark.parametrize("personality,temperature", [
    ("analyst", 0.3),
    ("hype", 0.9),
    ("default", 0.7),
    ("drunk", 0.7),
    ("announcer", 0.7),
])
def test_temperature_by_personality(personality, temperature):
    prompt = compose_prompt(_request(personality=personality), DataBundle(), None, TODAY)
    assert prompt.temperature == temperature


@pytest.mark.parametrize("length,tokens", [("short", 80), ("medium", 200), ("long", 400)])
def test_max_tokens_by_length(length, tokens):
    assert compose_prompt(_request(length=length), DataBundle(), None, TODAY).max_tokens == tokens


# ── text ───────────────────────────────────────────────────


def test_prompt_sections():
    text = compose_prompt(_request(personality="hype", length="short"), DataBundle(), None, TODAY).text
    assert text.startswith("You are Courtside")
    assert "HIGH ENERGY" in text
    assert "1-2 sentences ONLY" in text
    assert "Today is Wednesday, January 15, 2025." in text
    assert text.rstrip().endswith("Be concise. No essays.")
    assert "USER: how are the lakers doing" in text
    assert "VISUAL NOTE" not in text


def test_visual_note_included():
    visual = GamesVisual(data=[], date_display="Today")
    text = compose_prompt(_request(), DataBundle(), visual, TODAY).text
    assert "VISUAL NOTE: The user sees a grid of 0 game scores." in text


def test_describe_visual_none():
    assert describe_visual(None) is None


def test_game_focus_only_for_game_kind():
    ctx = GameContext(home_team="Lakers", away_team="Celtics", home_score=88, away_score=85, status="live")
    general = compose_prompt(_request(game_context=ctx), DataBundle(), None, TODAY).text
    game = compose_prompt(_request(kind="game", game_context=ctx), DataBundle(), None, TODAY).text
    assert "SPECIFIC GAME FOCUS" not in general
    assert "SPECIFIC GAME FOCUS" in game
    assert "Celtics @ Lakers" in game
    assert "Score: 85 - 88" in game


def test_notes_appended():
    bundle = DataBundle(notes=["No Miami Heat game found on Today. Available games were: none"])
    text = compose_prompt(_request(), bundle, None, TODAY).text
    assert "NOTES:\n- No Miami Heat game found" in text


# ── live context ───────────────────────────────────────────


def test_live_context_games_and_boxscores():
    box = Boxscore(
        game_id="401", home_team="Los Angeles Lakers", away_team="Boston Celtics",
        home_players=[PlayerLine(name="LeBron James", points=25, fgm=9, fga=17)],
    )
    context = build_live_context(DataBundle(games=[_game()], boxscores={"401": box}))
    assert "GAMES (1):" in context
    assert "Boston Celtics 85 @ Los Angeles Lakers 88 [live] Q3 4:12" in context
    assert "LeBron James: 25pts" in context
    assert "9-17 FG" in context


def test_live_context_scores_unavailable():
    assert "unavailable" in build_live_context(DataBundle(scores_failed=True))
    assert "none scheduled" in build_live_context(DataBundle())


def test_live_context_players():
    profile = PlayerProfile(
        hit=PlayerSearchHit(id="1", name="LeBron James", team="Los Angeles Lakers", position="F"),
        stats=PlayerSeasonStats(ppg=24.8, rpg=7.9, apg=8.7, games_played=40),
    )
    context = build_live_context(DataBundle(players={"LeBron James": profile, "Ghost": None}))
    assert "PLAYER LeBron James (Los Angeles Lakers, F): 24.8 ppg, 7.9 rpg, 8.7 apg" in context
    assert "40 GP" in context
    assert "PLAYER Ghost: stats unavailable." in context


def test_live_context_scales_fractional_percentages():
    profile = PlayerProfile(
        hit=PlayerSearchHit(id="1", name="LeBron James", team="Los Angeles Lakers"),
        stats=PlayerSeasonStats(fg_pct=0.5126, fg3_pct=0.41, ft_pct=0.75),
    )
    context = build_live_context(DataBundle(players={"LeBron James": profile}))
    assert "FG 51.3%, 3P 41.0%, FT 75.0%" in context
