import time
from typing import Any


class TTLCache:
    """In-memory cache with per-key TTL. Holds player lookups only.

    Expired entries are dropped when read and swept on every write, so the
    store stays bounded by the keys written within one TTL.
    """

    def __init__(self, clock=time.monotonic):
        self._store: dict[str, tuple[float, Any]] = {}
        self._clock = clock

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() > expires_at:
            del self._store[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: float):
        now = self._clock()
        self._prune(now)
        self._store[key] = (now + ttl, value)

    def _prune(self, now: float):
        expired = [k for k, (expires_at, _) in self._store.items() if now > expires_at]
        for k in expired:
            del self._store[k]

    def clear(self):
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


cache = TTLCache()
