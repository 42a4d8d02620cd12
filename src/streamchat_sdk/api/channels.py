"""Channels API methods."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from streamchat_sdk.models.channels import Channel, QueryChannelsResponse
from streamchat_sdk.models.query import QueryOption, QueryRequest, SortOption

if TYPE_CHECKING:
    from streamchat_sdk.client import Client
    from streamchat_sdk.http import HTTPClient

log = logging.getLogger(__name__)


class ChannelsAPI:
    def __init__(self, http: HTTPClient, client: Client | None = None) -> None:
        self._http = http
        self._client = client

    async def query(self, q: QueryOption, *sort: SortOption) -> list[Channel]:
        """Return the channels matching ``q`` with their members, messages and read state.

        Unlike the other queries this one is a POST with the envelope as the
        JSON body. Channels come back in server order.
        """
        request = QueryRequest.from_option(
            q,
            list(sort) or q.sort,
            state=True,
            user_id=q.user_id,
            member_limit=q.member_limit,
            message_limit=q.message_limit,
        )
        log.debug("Querying channels: %s", request.filter_conditions)
        r = await self._http.post("channels", json=request.to_payload())
        resp = QueryChannelsResponse.model_validate(r.json())

        result: list[Channel] = []
        for data in resp.channels:
            channel = data.channel
            channel.members = data.members
            channel.messages = data.messages
            channel.read = data.read
            if self._client is not None:
                channel.bind(self._client)
            result.append(channel)
        return result
