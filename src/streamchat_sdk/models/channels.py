from __future__ import annotations

import weakref
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic import PrivateAttr

from streamchat_sdk.models.base import ChatModel, NullableList
from streamchat_sdk.models.messages import Message
from streamchat_sdk.models.users import User

if TYPE_CHECKING:
    from streamchat_sdk.client import Client


class ChannelMember(ChatModel):
    user_id: str | None = None
    user: User | None = None
    role: str | None = None
    channel_role: str | None = None
    is_moderator: bool = False
    invited: bool = False
    invite_accepted_at: datetime | None = None
    invite_rejected_at: datetime | None = None
    banned: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ChannelRead(ChatModel):
    user: User | None = None
    last_read: datetime | None = None
    unread_messages: int = 0


class Channel(ChatModel):
    id: str
    type: str
    cid: str | None = None
    team: str | None = None
    config: dict[str, Any] | None = None
    created_by: User | None = None
    disabled: bool = False
    frozen: bool = False
    member_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_message_at: datetime | None = None
    members: NullableList[ChannelMember] = []
    messages: NullableList[Message] = []
    read: NullableList[ChannelRead] = []

    _client_ref: Optional[weakref.ref] = PrivateAttr(default=None)

    @property
    def client(self) -> Client | None:
        """The client that fetched this channel, or None once it is gone."""
        if self._client_ref is None:
            return None
        return self._client_ref()

    def bind(self, client: Client) -> None:
        self._client_ref = weakref.ref(client)


class ChannelStateResponse(ChatModel):
    channel: Channel
    messages: NullableList[Message] = []
    read: NullableList[ChannelRead] = []
    members: NullableList[ChannelMember] = []


class QueryChannelsResponse(ChatModel):
    channels: NullableList[ChannelStateResponse] = []
