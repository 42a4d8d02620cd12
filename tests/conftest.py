"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from streamchat_sdk.http import HTTPClient


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            body = None
            if request.content:
                try:
                    body = json.loads(request.content)
                except ValueError:
                    body = request.content
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": dict(request.url.params),
                "headers": dict(request.headers),
                "body": body,
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient("test-key", token="test-token", base_url="https://chat.test")
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(
        base_url="https://chat.test",
        transport=transport,
    )
    return client, transport, calls

