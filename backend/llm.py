"""Text generation with ordered model fallback and a sticky cursor."""

from __future__ import annotations
import asyncio
import logging
import threading
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from config import (
    LLM_BASE_URL,
    LLM_MODELS,
    LLM_SAFETY_SETTINGS,
    LLM_SEND_SAFETY_SETTINGS,
    LLM_TIMEOUT,
    OPENAI_API_KEY,
)
from errors import BackendInvocationError, TotalBackendFailure
from prompts import ComposedPrompt

logger = logging.getLogger(__name__)


class ModelCursor:
    """Index of the last model that answered. Shared by all requests.

    Reads and writes are locked, but a request reads once and writes once, so
    two concurrent requests can still leave the cursor one step behind or ahead
    of the latest success. That only changes which model is tried first.
    """

    def __init__(self, start: int = 0):
        self._lock = threading.Lock()
        self._index = start

    def get(self) -> int:
        with self._lock:
            return self._index

    def set(self, index: int):
        with self._lock:
            self._index = index


@dataclass(frozen=True)
class Generation:
    text: str
    model: str


class ModelInvoker:
    """Tries models from the cursor to the end of the list; no wrap-around."""

    def __init__(
        self,
        client: AsyncOpenAI,
        models: list[str],
        cursor: ModelCursor | None = None,
        safety_settings: list[dict] | None = None,
        timeout: float = LLM_TIMEOUT,
    ):
        self.client = client
        self.models = list(models)
        self.cursor = cursor or ModelCursor()
        self.safety_settings = safety_settings
        self.timeout = timeout

    async def _call(self, model: str, prompt: ComposedPrompt) -> str:
        kwargs = {}
        if self.safety_settings:
            kwargs["extra_body"] = {"safety_settings": self.safety_settings}
        try:
            completion = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=model,
                    messages=[{"role": "user", "content": prompt.text}],
                    max_completion_tokens=prompt.max_tokens,
                    temperature=prompt.temperature,
                    **kwargs,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise BackendInvocationError(model, f"timed out after {self.timeout:g}s") from e
        except OpenAIError as e:
            raise BackendInvocationError(model, f"{e.__class__.__name__}: {e}") from e

        choice = completion.choices[0] if completion.choices else None
        text = (choice.message.content or "").strip() if choice and choice.message else ""
        if not text:
            raise BackendInvocationError(model, "empty response")
        return text

    async def generate(self, prompt: ComposedPrompt) -> Generation:
        errors: list[BackendInvocationError] = []
        start = self.cursor.get()
        for i in range(start, len(self.models)):
            model = self.models[i]
            try:
                text = await self._call(model, prompt)
            except BackendInvocationError as e:
                logger.warning("[llm] %s", e)
                errors.append(e)
                continue
            if i != start:
                logger.info("[llm] cursor %d -> %d (%s)", start, i, model)
            self.cursor.set(i)
            return Generation(text=text, model=model)

        failure = TotalBackendFailure(errors)
        logger.error("[llm] %s", failure)
        raise failure


def create_invoker() -> ModelInvoker | None:
    """Invoker from config, or None when no API key is set."""
    if not OPENAI_API_KEY:
        logger.warning("[llm] OPENAI_API_KEY not set; answers will be visual-only")
        return None
    client = AsyncOpenAI(api_key=OPENAI_API_KEY, base_url=LLM_BASE_URL)
    return ModelInvoker(
        client,
        LLM_MODELS,
        safety_settings=LLM_SAFETY_SETTINGS if LLM_SEND_SAFETY_SETTINGS else None,
    )
