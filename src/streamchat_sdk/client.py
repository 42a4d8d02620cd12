"""High-level chat client composing HTTP and the API groups."""

from __future__ import annotations

from typing import Any

from streamchat_sdk.http import DEFAULT_BASE_URL, HTTPClient
from streamchat_sdk.models.channels import Channel
from streamchat_sdk.models.messages import Message, SearchResponse
from streamchat_sdk.models.moderation import MessageFlag
from streamchat_sdk.models.query import QueryOption, SearchRequest, SortOption
from streamchat_sdk.models.users import User


class Client:
    """Top-level SDK client.

    Usage::

        async with Client("api-key", token) as client:
            users = await client.query_users(
                QueryOption(filter={"role": "admin"}, limit=10),
                SortOption(field="created_at", direction=SortDirection.DESC),
            )
    """

    def __init__(
        self,
        api_key: str,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 6.0,
    ) -> None:
        self.http = HTTPClient(api_key, token, base_url=base_url, timeout=timeout)

        # Lazily populated API groups
        self._users: Any = None
        self._channels: Any = None
        self._moderation: Any = None
        self._search: Any = None

    # --- API group properties ---

    @property
    def users(self) -> Any:
        if self._users is None:
            from streamchat_sdk.api.users import UsersAPI
            self._users = UsersAPI(self.http)
        return self._users

    @property
    def channels(self) -> Any:
        if self._channels is None:
            from streamchat_sdk.api.channels import ChannelsAPI
            self._channels = ChannelsAPI(self.http, self)
        return self._channels

    @property
    def moderation(self) -> Any:
        if self._moderation is None:
            from streamchat_sdk.api.moderation import ModerationAPI
            self._moderation = ModerationAPI(self.http)
        return self._moderation

    @property
    def search_api(self) -> Any:
        if self._search is None:
            from streamchat_sdk.api.search import SearchAPI
            self._search = SearchAPI(self.http)
        return self._search

    # --- Convenience queries ---

    async def query_users(self, q: QueryOption, *sort: SortOption) -> list[User]:
        return await self.users.query(q, *sort)

    async def query_channels(self, q: QueryOption, *sort: SortOption) -> list[Channel]:
        return await self.channels.query(q, *sort)

    async def query_message_flags(self, q: QueryOption) -> list[MessageFlag]:
        return await self.moderation.query_message_flags(q)

    async def search(self, request: SearchRequest) -> list[Message]:
        return await self.search_api.search(request)

    async def search_with_full_response(self, request: SearchRequest) -> SearchResponse:
        return await self.search_api.search_with_full_response(request)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
