"""End-to-end pipeline tests with mocked data and a fake invoker."""

from unittest.mock import AsyncMock, patch

import pytest

from chat import answer, extract_verdict
from config import APOLOGY_MESSAGE, DATA_SOURCE_UNAVAILABLE, NO_MODEL_WITH_VISUAL, NO_MODEL_WITHOUT_VISUAL
from errors import BackendInvocationError, TotalBackendFailure, UpstreamDataError
from gather import DataBundle
from llm import Generation
from models import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    LiveGameSnapshot,
    PlayerProfile,
    PlayerSearchHit,
    PlayerSeasonStats,
    TeamLine,
)

from conftest import TODAY


class FakeInvoker:
    def __init__(self, text="Great game.", model="model-a", error=None):
        self.text, self.model, self.error = text, model, error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return Generation(text=self.text, model=self.model)


def _games_bundle():
    return DataBundle(games=[LiveGameSnapshot(
        game_id="401",
        home_team=TeamLine(name="Los Angeles Lakers", abbreviation="LAL", score=110),
        away_team=TeamLine(name="Boston Celtics", abbreviation="BOS", score=100),
        status="final",
    )])


def _gather(bundle):
    return patch("chat.gather_data", AsyncMock(return_value=bundle))


# ── verdict ────────────────────────────────────────────────


def test_extract_verdict_last_two_sentences():
    text = "Luka scores more. Jokic rebounds more! Overall, Jokic is better. It is close though."
    assert extract_verdict(text) == "Overall, Jokic is better. It is close though."


def test_extract_verdict_short_text():
    assert extract_verdict("Jokic wins") == "Jokic wins"
    assert extract_verdict("") == ""


# ── pipeline ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_games_question_answered():
    invoker = FakeInvoker(text="Lakers beat Boston 110-100.")
    with _gather(_games_bundle()):
        result = await answer(ChatRequest(message="what games are on tonight"), invoker, TODAY)
    assert isinstance(result, ChatResponse)
    assert result.response == "Lakers beat Boston 110-100."
    assert result.model == "model-a"
    assert result.intent == "games"
    assert result.visual.type == "games"
    assert result.games_count == 1
    assert "VISUAL NOTE" in invoker.prompts[0].text


@pytest.mark.asyncio
async def test_visuals_not_requested():
    invoker = FakeInvoker()
    with _gather(_games_bundle()):
        result = await answer(ChatRequest(message="scores", request_visuals=False), invoker, TODAY)
    assert result.visual is None
    assert "VISUAL NOTE" not in invoker.prompts[0].text


@pytest.mark.asyncio
async def test_no_invoker_returns_visual_only():
    with _gather(_games_bundle()):
        result = await answer(ChatRequest(message="scores"), None, TODAY)
    assert result.model == "none"
    assert result.response == NO_MODEL_WITH_VISUAL
    assert result.visual is not None


@pytest.mark.asyncio
async def test_no_invoker_without_visual():
    with _gather(DataBundle()):
        result = await answer(ChatRequest(message="hello there"), None, TODAY)
    assert result.model == "none"
    assert result.response == NO_MODEL_WITHOUT_VISUAL
    assert result.visual is None


@pytest.mark.asyncio
async def test_total_failure_becomes_error_response():
    failure = TotalBackendFailure([BackendInvocationError("model-a", "timed out after 30s")])
    with _gather(_games_bundle()):
        result = await answer(ChatRequest(message="scores"), FakeInvoker(error=failure), TODAY)
    assert isinstance(result, ErrorResponse)
    assert result.response == APOLOGY_MESSAGE
    assert "model-a" in result.error
    assert result.source_url


@pytest.mark.asyncio
async def test_comparison_gets_verdict():
    bundle = DataBundle(players={
        "Luka Dončić": PlayerProfile(hit=PlayerSearchHit(id="1", name="Luka Dončić"), stats=PlayerSeasonStats(ppg=33.9)),
        "Nikola Jokić": PlayerProfile(hit=PlayerSearchHit(id="2", name="Nikola Jokić"), stats=PlayerSeasonStats(ppg=29.6)),
    })
    invoker = FakeInvoker(text="Luka scores more. Jokic passes better. Jokic wins overall.")
    with _gather(bundle):
        result = await answer(ChatRequest(message="compare luka vs jokic"), invoker, TODAY)
    assert result.intent == "comparison"
    assert result.visual.type == "comparison"
    assert result.visual.data.verdict == "Jokic passes better. Jokic wins overall."
    assert result.visual.data.categories[0].winner == "player1"


@pytest.mark.asyncio
async def test_all_data_failing_still_answers():
    down = AsyncMock(side_effect=UpstreamDataError("HTTP 503"))
    with patch("espn.fetch_live_scores", down), \
         patch("espn.fetch_all_boxscores", down):
        result = await answer(ChatRequest(message="any live scores?"), FakeInvoker(text="Scores are down."), TODAY)
    assert isinstance(result, ChatResponse)
    assert result.visual is None
    assert result.response == "Scores are down."
    assert result.data_source == DATA_SOURCE_UNAVAILABLE
    assert result.games_count == 0
