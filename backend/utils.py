import asyncio
import logging

import aiohttp

from config import HTTP_TIMEOUT, USER_AGENT
from errors import UpstreamDataError

logger = logging.getLogger(__name__)

_session: aiohttp.ClientSession | None = None


async def get_session() -> aiohttp.ClientSession:
    global _session
    if _session is None or _session.closed:
        _session = aiohttp.ClientSession(
            headers={"User-Agent": USER_AGENT},
            timeout=aiohttp.ClientTimeout(total=HTTP_TIMEOUT),
        )
    return _session


async def close_session():
    global _session
    if _session and not _session.closed:
        await _session.close()
        _session = None


async def fetch_json(url: str, params: dict | None = None) -> dict | list:
    """Fetch JSON from a URL. Raises UpstreamDataError on any failure."""
    session = await get_session()
    try:
        async with session.get(url, params=params) as resp:
            if resp.status != 200:
                raise UpstreamDataError(f"{url} returned HTTP {resp.status}")
            return await resp.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise UpstreamDataError(f"{url}: {e.__class__.__name__}: {e}") from e


def as_int(value, default: int = 0) -> int:
    """Lenient int parse for provider strings like '12', '+5' or '--'."""
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def as_float(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
