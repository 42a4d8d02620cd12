"""HTTP client wrapping httpx with auth, rate limiting, and retry."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from streamchat_sdk.errors import ChatHTTPError, ChatNetworkError
from streamchat_sdk.rate_limit import RateLimiter

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://chat.stream-io-api.com"

_MAX_RETRIES = 3
_BASE_RETRY_DELAY = 1.0
_RETRYABLE_STATUSES = {500, 502, 503, 504}


class HTTPClient:
    """Async HTTP client for the chat REST API."""

    def __init__(
        self,
        api_key: str,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 6.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._token = token
        self._rate_limiter = RateLimiter()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        return self._token

    @token.setter
    def token(self, value: str | None) -> None:
        self._token = value

    def _headers(self) -> dict[str, str]:
        h: dict[str, str] = {}
        if self._token:
            h["Authorization"] = self._token
            h["Stream-Auth-Type"] = "jwt"
        return h

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an API request with rate-limit awareness and retry on 429/5xx."""
        merged_headers = self._headers()
        if headers:
            merged_headers.update(headers)
        merged_params = {"api_key": self.api_key}
        if params:
            merged_params.update(params)

        for attempt in range(_MAX_RETRIES):
            await self._rate_limiter.wait_if_needed(path)

            try:
                response = await self._client.request(
                    method,
                    path,
                    json=json,
                    params=merged_params,
                    headers=merged_headers,
                )
            except httpx.TransportError as exc:
                raise ChatNetworkError(str(exc)) from exc

            self._rate_limiter.update_from_response(path, response)

            if response.status_code == 429:
                if attempt < _MAX_RETRIES - 1:
                    retry_after = self._rate_limiter.reset_delay(path) or _BASE_RETRY_DELAY
                    log.info("Rate limited on %s %s, retrying in %.1fs", method, path, retry_after)
                    await asyncio.sleep(retry_after)
                    continue
                raise ChatHTTPError.from_response(response)

            if response.status_code in _RETRYABLE_STATUSES:
                if attempt < _MAX_RETRIES - 1:
                    delay = _BASE_RETRY_DELAY * (2 ** attempt)
                    log.info(
                        "%s %s returned %d, retrying in %.1fs",
                        method, path, response.status_code, delay,
                    )
                    await asyncio.sleep(delay)
                    continue
                raise ChatHTTPError.from_response(response)

            if response.status_code >= 400:
                raise ChatHTTPError.from_response(response)

            return response

        # Should not reach here, but just in case
        raise ChatHTTPError.from_response(response)  # type: ignore[possibly-undefined]

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def close(self) -> None:
        await self._client.aclose()
