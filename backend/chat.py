"""Chat orchestration: intent -> data -> visual -> prompt -> model -> response."""

from __future__ import annotations
import logging
import re
from datetime import date

from config import (
    APOLOGY_MESSAGE,
    ESPN_FALLBACK_URL,
    NO_MODEL_WITH_VISUAL,
    NO_MODEL_WITHOUT_VISUAL,
)
from errors import TotalBackendFailure
from gather import DataBundle, gather_data
from intents import classify_intent
from llm import ModelInvoker
from models import ChatRequest, ChatResponse, ComparisonVisual, ErrorResponse, VisualPayload
from prompts import compose_prompt
from visuals import build_visual

logger = logging.getLogger(__name__)

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+|[^.!?]+$")


def extract_verdict(text: str, sentences: int = 2) -> str:
    """Last `sentences` sentences of the generated text."""
    parts = [s.strip() for s in _SENTENCE_RE.findall(text or "") if s.strip()]
    return " ".join(parts[-sentences:])


def _response(
    request: ChatRequest,
    text: str,
    visual: VisualPayload | None,
    model: str,
    intent_type: str,
    bundle: DataBundle,
) -> ChatResponse:
    return ChatResponse(
        response=text,
        visual=visual,
        model=model,
        personality=request.personality,
        length=request.length,
        intent=intent_type,
        data_source=bundle.source,
        data_timestamp=bundle.last_updated,
        games_count=len(bundle.games),
    )


async def answer(
    request: ChatRequest,
    invoker: ModelInvoker | None,
    today: date | None = None,
) -> ChatResponse | ErrorResponse:
    """Run the whole pipeline for one chat message."""
    today = today or date.today()

    intent = classify_intent(request.message, today)
    bundle = await gather_data(intent)
    visual = build_visual(intent, bundle) if request.request_visuals else None

    if invoker is None:
        text = NO_MODEL_WITH_VISUAL if visual else NO_MODEL_WITHOUT_VISUAL
        return _response(request, text, visual, "none", intent.type, bundle)

    prompt = compose_prompt(request, bundle, visual, today)
    try:
        generation = await invoker.generate(prompt)
    except TotalBackendFailure as e:
        logger.error("[chat] no model answered: %s", e)
        return ErrorResponse(response=APOLOGY_MESSAGE, error=str(e), source_url=ESPN_FALLBACK_URL)

    if isinstance(visual, ComparisonVisual):
        visual.data.verdict = extract_verdict(generation.text)

    logger.info("[chat] %s answered by %s", intent.type, generation.model)
    return _response(request, generation.text, visual, generation.model, intent.type, bundle)
