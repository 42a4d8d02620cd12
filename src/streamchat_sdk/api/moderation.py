"""Moderation API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from streamchat_sdk.models.moderation import MessageFlag, QueryMessageFlagsResponse
from streamchat_sdk.models.query import QueryOption, QueryRequest

if TYPE_CHECKING:
    from streamchat_sdk.http import HTTPClient


class ModerationAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def query_message_flags(self, q: QueryOption) -> list[MessageFlag]:
        """Return message flags matching ``q``. Only filter, limit and offset are sent."""
        request = QueryRequest.from_option(q)
        r = await self._http.get(
            "moderation/flags/message", params={"payload": request.to_json()}
        )
        return QueryMessageFlagsResponse.model_validate(r.json()).flags
