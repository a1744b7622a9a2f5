"""FastAPI application entry point."""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from chat import answer
from config import (
    APOLOGY_MESSAGE,
    BAD_REQUEST_MESSAGE,
    CHAT_RATE_LIMIT,
    CORS_ORIGINS,
    ESPN_FALLBACK_URL,
    LLM_MODELS,
    LOG_LEVEL,
)
from data.players import PLAYER_ALIASES
from data.teams import TEAMS
from errors import ClientInputError
from llm import ModelInvoker, create_invoker
from models import ChatRequest, ErrorResponse
from utils import close_session

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

_invoker: ModelInvoker | None = create_invoker()


def get_invoker() -> ModelInvoker | None:
    return _invoker


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "[startup] %d player aliases, %d team keys, models: %s",
        len(PLAYER_ALIASES), len(TEAMS), ", ".join(LLM_MODELS) if _invoker else "none (no API key)",
    )
    yield
    await close_session()
    logger.info("[shutdown] Closed.")


app = FastAPI(
    title="Courtside Chat API",
    version="1.0.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _bad_request(error: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": error, "response": BAD_REQUEST_MESSAGE},
    )


async def parse_chat_request(request: Request) -> ChatRequest:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ClientInputError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise ClientInputError("Request body must be a JSON object")
    if not str(body.get("message") or "").strip():
        raise ClientInputError("Message is required")
    try:
        return ChatRequest.model_validate(body)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"]) or "body"
        raise ClientInputError(f"Invalid field '{field}': {first['msg']}") from e


@app.get("/api/health")
async def health(invoker: ModelInvoker | None = Depends(get_invoker)):
    return {
        "status": "ok",
        "models": invoker.models if invoker else [],
        "modelCursor": invoker.cursor.get() if invoker else None,
        "aliases": len(PLAYER_ALIASES),
        "teams": len({t.abbreviation for t in TEAMS.values()}),
    }


@app.post("/api/ai/chat")
@limiter.limit(CHAT_RATE_LIMIT)
async def chat_endpoint(request: Request, invoker: ModelInvoker | None = Depends(get_invoker)):
    try:
        chat_request = await parse_chat_request(request)
    except ClientInputError as e:
        logger.info("[chat] rejected request: %s", e)
        return _bad_request(str(e))

    try:
        result = await answer(chat_request, invoker)
    except Exception as e:
        logger.exception("[chat] pipeline failed")
        result = ErrorResponse(response=APOLOGY_MESSAGE, error=str(e), source_url=ESPN_FALLBACK_URL)

    return JSONResponse(content=result.model_dump(by_alias=True, mode="json"))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
