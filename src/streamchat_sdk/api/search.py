"""Search API methods."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from streamchat_sdk.errors import ChatValidationError
from streamchat_sdk.models.messages import Message, SearchResponse
from streamchat_sdk.models.query import SearchRequest
from streamchat_sdk.pagination import SearchIterator

if TYPE_CHECKING:
    from streamchat_sdk.http import HTTPClient

log = logging.getLogger(__name__)


def check_search_request(request: SearchRequest) -> None:
    """Raise :class:`ChatValidationError` if ``request`` combines exclusive options."""
    if request.offset and (request.sort or request.next):
        raise ChatValidationError("cannot use offset with next or sort parameters")
    if request.query and request.message_filters:
        raise ChatValidationError("can only specify query or message_filters, not both")


class SearchAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def search(self, request: SearchRequest) -> list[Message]:
        """Return the matching messages, dropping the pagination cursors."""
        result = await self.search_with_full_response(request)
        return [res.message for res in result.results]

    async def search_with_full_response(self, request: SearchRequest) -> SearchResponse:
        """Search and return the full response including ``next``/``previous`` cursors."""
        check_search_request(request)
        payload = request.to_json()
        log.debug("Searching messages: %s", payload)
        r = await self._http.get("search", params={"payload": payload})
        return SearchResponse.model_validate(r.json())

    def iter_search(self, request: SearchRequest, *, page_size: int = 100) -> SearchIterator:
        """Iterate over every matching message, following ``next`` cursors.

        ``page_size`` is used when the request does not set its own ``limit``.
        """
        if request.offset:
            raise ChatValidationError("cannot iterate a search that uses offset")
        check_search_request(request)
        return SearchIterator(self, request, page_size=page_size)
