"""Tests for the rate limiter."""

import time

import httpx
import pytest

from streamchat_sdk.rate_limit import BucketInfo, RateLimiter, classify


class TestClassify:
    def test_users(self):
        assert classify("users") == "users"

    def test_leading_slash_ignored(self):
        assert classify("/users") == "users"

    def test_channels(self):
        assert classify("channels") == "channels"

    def test_message_flags(self):
        assert classify("moderation/flags/message") == "moderation"

    def test_search(self):
        assert classify("search") == "search"

    def test_fallback(self):
        assert classify("app") == "default"


class TestRateLimiter:
    def test_update_from_response(self):
        rl = RateLimiter()
        response = httpx.Response(
            200,
            headers={
                "x-ratelimit-limit": "60",
                "x-ratelimit-remaining": "59",
                "x-ratelimit-reset": str(int(time.time()) + 60),
            },
        )
        rl.update_from_response("search", response)
        bucket = rl._buckets.get("search")
        assert bucket is not None
        assert bucket.limit == 60
        assert bucket.remaining == 59

    def test_no_update_without_headers(self):
        rl = RateLimiter()
        rl.update_from_response("users", httpx.Response(200))
        assert "users" not in rl._buckets

    def test_reset_delay_unknown(self):
        rl = RateLimiter()
        assert rl.reset_delay("users") is None

    def test_reset_delay_past_is_zero(self):
        rl = RateLimiter()
        rl._buckets["users"] = BucketInfo(limit=5, remaining=0, reset=time.time() - 10)
        assert rl.reset_delay("users") == 0.0

    def test_reset_delay_future(self):
        rl = RateLimiter()
        rl._buckets["users"] = BucketInfo(limit=5, remaining=0, reset=time.time() + 5)
        assert 4.0 < rl.reset_delay("users") <= 5.0

    @pytest.mark.asyncio
    async def test_wait_if_needed_no_bucket(self):
        rl = RateLimiter()
        await rl.wait_if_needed("users")

    @pytest.mark.asyncio
    async def test_wait_if_needed_has_remaining(self, monkeypatch):
        import asyncio

        slept = []

        async def fake_sleep(delay):
            slept.append(delay)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        rl = RateLimiter()
        rl._buckets["channels"] = BucketInfo(limit=5, remaining=3, reset=time.time() + 60)
        await rl.wait_if_needed("channels")
        assert slept == []

    @pytest.mark.asyncio
    async def test_wait_if_needed_exhausted_past_reset(self):
        rl = RateLimiter()
        rl._buckets["channels"] = BucketInfo(limit=5, remaining=0, reset=time.time() - 1)
        # Reset is in the past, should not block
        await rl.wait_if_needed("channels")

    @pytest.mark.asyncio
    async def test_wait_if_needed_exhausted_future_reset(self, monkeypatch):
        """Exhausted bucket with future reset should sleep until reset."""
        import asyncio

        rl = RateLimiter()
        rl._buckets["search"] = BucketInfo(limit=5, remaining=0, reset=time.time() + 5)

        sleep_delays: list[float] = []

        async def fake_sleep(delay):
            sleep_delays.append(delay)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        await rl.wait_if_needed("search")

        assert len(sleep_delays) == 1
        assert 4.0 < sleep_delays[0] <= 6.0
