"""Async iterator for cursor-based search pagination."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator

from streamchat_sdk.models.messages import Message
from streamchat_sdk.models.query import SearchRequest

if TYPE_CHECKING:
    from streamchat_sdk.api.search import SearchAPI


class SearchIterator(AsyncIterator[Message]):
    """Yields messages across pages of a search, following the ``next`` cursor."""

    def __init__(
        self,
        api: SearchAPI,
        request: SearchRequest,
        *,
        page_size: int = 100,
    ) -> None:
        self._api = api
        self._request = request
        self._limit = request.limit or page_size
        self._buffer: list[Message] = []
        self._cursor: str = request.next
        self._exhausted = False

    def __aiter__(self) -> AsyncIterator[Message]:
        return self

    async def __anext__(self) -> Message:
        if self._buffer:
            return self._buffer.pop(0)
        if self._exhausted:
            raise StopAsyncIteration
        await self._fetch_page()
        if not self._buffer:
            raise StopAsyncIteration
        return self._buffer.pop(0)

    async def _fetch_page(self) -> None:
        page = self._request.model_copy(update={"limit": self._limit, "next": self._cursor})
        resp = await self._api.search_with_full_response(page)
        self._buffer = [res.message for res in resp.results]
        cursor = resp.next or ""
        if not cursor or cursor == self._cursor or not resp.results:
            self._exhausted = True
        self._cursor = cursor

    async def flatten(self) -> list[Message]:
        """Consume the full iterator into a list."""
        result: list[Message] = []
        async for item in self:
            result.append(item)
        return result
