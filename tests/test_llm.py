"""Tests for the model invoker and its sticky cursor."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from openai import OpenAIError

from errors import TotalBackendFailure
from llm import ModelCursor, ModelInvoker
from prompts import ComposedPrompt

MODELS = ["model-a", "model-b", "model-c"]
PROMPT = ComposedPrompt(text="USER: hi", max_tokens=200, temperature=0.7)


def _completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def _client(*side_effect):
    create = AsyncMock(side_effect=list(side_effect))
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create))), create


def _models_called(create):
    return [c.kwargs["model"] for c in create.call_args_list]


# ── fallback ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_first_model_answers():
    client, create = _client(_completion("Lakers win."))
    invoker = ModelInvoker(client, MODELS)
    result = await invoker.generate(PROMPT)
    assert result.text == "Lakers win."
    assert result.model == "model-a"
    assert invoker.cursor.get() == 0

    kwargs = create.call_args.kwargs
    assert kwargs["max_completion_tokens"] == 200
    assert kwargs["temperature"] == 0.7
    assert kwargs["messages"] == [{"role": "user", "content": "USER: hi"}]
    assert "extra_body" not in kwargs


@pytest.mark.asyncio
async def test_falls_back_and_cursor_sticks():
    client, create = _client(OpenAIError("boom"), _completion("from b"), _completion("again b"))
    invoker = ModelInvoker(client, MODELS)

    first = await invoker.generate(PROMPT)
    assert first.model == "model-b"
    assert invoker.cursor.get() == 1

    second = await invoker.generate(PROMPT)
    assert second.model == "model-b"
    assert _models_called(create) == ["model-a", "model-b", "model-b"]


@pytest.mark.asyncio
async def test_no_wrap_around():
    client, create = _client(OpenAIError("c down"))
    invoker = ModelInvoker(client, MODELS, cursor=ModelCursor(2))
    with pytest.raises(TotalBackendFailure) as exc:
        await invoker.generate(PROMPT)
    assert _models_called(create) == ["model-c"]
    assert "model-c" in str(exc.value)
    assert invoker.cursor.get() == 2


@pytest.mark.asyncio
async def test_total_failure_lists_every_model():
    client, _ = _client(OpenAIError("a"), OpenAIError("b"), OpenAIError("c"))
    invoker = ModelInvoker(client, MODELS)
    with pytest.raises(TotalBackendFailure) as exc:
        await invoker.generate(PROMPT)
    assert str(exc.value).startswith("All AI models failed.")
    assert [e.model for e in exc.value.errors] == MODELS
    assert invoker.cursor.get() == 0


@pytest.mark.asyncio
async def test_empty_text_counts_as_failure():
    client, _ = _client(_completion("   "), SimpleNamespace(choices=[]), _completion("ok"))
    invoker = ModelInvoker(client, MODELS)
    result = await invoker.generate(PROMPT)
    assert result.model == "model-c"
    assert invoker.cursor.get() == 2


@pytest.mark.asyncio
async def test_timeout_counts_as_failure():
    async def slow(**kwargs):
        if kwargs["model"] == "model-a":
            await asyncio.sleep(1)
        return _completion("fast")

    create = AsyncMock(side_effect=slow)
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    invoker = ModelInvoker(client, MODELS, timeout=0.05)
    result = await invoker.generate(PROMPT)
    assert result.model == "model-b"


@pytest.mark.asyncio
async def test_safety_settings_sent_when_configured():
    settings = [{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"}]
    client, create = _client(_completion("ok"))
    invoker = ModelInvoker(client, MODELS, safety_settings=settings)
    await invoker.generate(PROMPT)
    assert create.call_args.kwargs["extra_body"] == {"safety_settings": settings}


# ── cursor ─────────────────────────────────────────────────


def test_cursor_get_set():
    cursor = ModelCursor()
    assert cursor.get() == 0
    cursor.set(2)
    assert cursor.get() == 2
