"""
In-memory LRU + TTL cache for price responses.

Only the HTTP layer uses this; the calculator is pure and never reads it.
Keyed on every field that affects the price, so a hit always returns exactly
what the calculator would.
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Optional

from .config import settings
from .schemas import PriceRequest, PriceResponse

logger = logging.getLogger(__name__)


class PriceCache:
    """
    Least-recently-used cache with a per-entry time-to-live.
    Sync routes run in FastAPI's threadpool, so all access goes through a lock.
    """

    def __init__(self, ttl_seconds: float = 300.0, max_size: int = 1000, clock=time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        self._entries: "OrderedDict[tuple, tuple[float, PriceResponse]]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def make_key(request: PriceRequest) -> tuple:
        return (
            request.width_cm,
            request.depth_cm,
            request.height_cm,
            request.material,
            request.finish,
            request.tier,
            request.quantity,
        )

    def get(self, request: PriceRequest) -> Optional[PriceResponse]:
        key = self.make_key(request)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, response = entry
            if self._clock() - stored_at > self.ttl_seconds:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return response

    def set(self, request: PriceRequest, response: PriceResponse) -> None:
        key = self.make_key(request)
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Price cache full (%d) - evicted %s", self.max_size, evicted)
            self._entries[key] = (self._clock(), response)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict:
        with self._lock:
            size = len(self._entries)
        return {"size": size, "max_size": self.max_size, "ttl_seconds": self.ttl_seconds}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


price_cache = PriceCache(
    ttl_seconds=settings.PRICE_CACHE_TTL_SECONDS,
    max_size=settings.PRICE_CACHE_MAX_SIZE,
)
