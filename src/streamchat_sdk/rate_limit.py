"""Header-driven rate-limit tracker keyed by API endpoint."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

import httpx

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Path → bucket classifier
# ---------------------------------------------------------------------------

_PREFIX_MAP: list[tuple[str, str]] = [
    ("moderation", "moderation"),
    ("channels", "channels"),
    ("search", "search"),
    ("users", "users"),
]


def classify(path: str) -> str:
    """Map a request path to its rate-limit bucket."""
    path = path.lstrip("/")
    for prefix, bucket in _PREFIX_MAP:
        if path.startswith(prefix):
            return bucket
    return "default"


# ---------------------------------------------------------------------------
# Bucket info parsed from response headers
# ---------------------------------------------------------------------------

@dataclass
class BucketInfo:
    limit: int = 0
    remaining: int = 0
    reset: float = 0.0  # unix timestamp


# ---------------------------------------------------------------------------
# Rate-limit store
# ---------------------------------------------------------------------------

class RateLimiter:
    """Tracks per-endpoint rate limits from response headers and pre-emptively waits."""

    def __init__(self) -> None:
        self._buckets: dict[str, BucketInfo] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, bucket: str) -> asyncio.Lock:
        if bucket not in self._locks:
            self._locks[bucket] = asyncio.Lock()
        return self._locks[bucket]

    def update_from_response(self, path: str, response: httpx.Response) -> None:
        """Update bucket info from X-RateLimit-* headers."""
        headers = response.headers
        limit = headers.get("x-ratelimit-limit")
        remaining = headers.get("x-ratelimit-remaining")
        reset = headers.get("x-ratelimit-reset")
        if limit is None:
            return
        self._buckets[classify(path)] = BucketInfo(
            limit=int(limit),
            remaining=int(remaining) if remaining else 0,
            reset=float(reset) if reset else 0.0,
        )

    def reset_delay(self, path: str) -> float | None:
        """Seconds until the bucket for ``path`` resets, or None if unknown."""
        bucket = self._buckets.get(classify(path))
        if bucket is None or not bucket.reset:
            return None
        return max(bucket.reset - time.time(), 0.0)

    async def wait_if_needed(self, path: str) -> None:
        """Sleep if the bucket for this path is exhausted."""
        name = classify(path)
        bucket = self._buckets.get(name)
        if bucket is None:
            return
        if bucket.remaining > 0:
            return
        delay = bucket.reset - time.time()
        if delay > 0:
            async with self._lock_for(name):
                # Re-check after acquiring lock
                bucket = self._buckets.get(name)
                if bucket and bucket.remaining <= 0:
                    delay = bucket.reset - time.time()
                    if delay > 0:
                        log.debug("Rate limit exhausted for %s, waiting %.1fs", name, delay)
                        await asyncio.sleep(delay)
