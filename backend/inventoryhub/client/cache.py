"""Time-to-live cache for read responses held by the client."""

import time
from collections.abc import Callable

from inventoryhub.core.logging import get_logger, log_cache_operation
from inventoryhub.schemas.envelope import SuccessResponse

logger = get_logger(__name__)

ALL_PRODUCTS_KEY = "all-products"
LOW_STOCK_PRODUCTS_KEY = "low-stock-products"


def product_key(product_id: int) -> str:
    return f"product-{product_id}"


class ResponseCache:
    """Keyed envelope cache with a fixed time-to-live.

    Only successful envelopes are stored. Entries expire once their age
    reaches ``ttl_seconds``; expired entries are dropped on read.
    """

    def __init__(self, ttl_seconds: float = 300.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # key -> (envelope, inserted_at)
        self._entries: dict[str, tuple[SuccessResponse, float]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> SuccessResponse | None:
        entry = self._entries.get(key)
        if entry is None:
            log_cache_operation(logger, "get", key, hit=False)
            return None

        envelope, inserted_at = entry
        if self._clock() - inserted_at >= self.ttl_seconds:
            del self._entries[key]
            log_cache_operation(logger, "get", key, hit=False, expired=True)
            return None

        log_cache_operation(logger, "get", key, hit=True)
        return envelope

    def put(self, key: str, envelope: SuccessResponse) -> None:
        if not envelope.success:
            raise ValueError("only successful responses can be cached")
        self._entries[key] = (envelope, self._clock())
        log_cache_operation(logger, "put", key)

    def invalidate(self, *keys: str) -> None:
        for key in keys:
            if self._entries.pop(key, None) is not None:
                log_cache_operation(logger, "invalidate", key)

    def clear(self) -> None:
        self._entries.clear()
        logger.info("Cache cleared")
