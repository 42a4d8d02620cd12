from datetime import datetime
from typing import Any

from streamchat_sdk.models.base import ChatModel, NullableList
from streamchat_sdk.models.users import User


class Reaction(ChatModel):
    type: str
    message_id: str | None = None
    user_id: str | None = None
    user: User | None = None
    score: int = 1
    created_at: datetime | None = None


class Message(ChatModel):
    id: str
    text: str = ""
    html: str | None = None
    type: str | None = None
    cid: str | None = None
    user: User | None = None
    attachments: NullableList[dict[str, Any]] = []
    latest_reactions: NullableList[Reaction] = []
    own_reactions: NullableList[Reaction] = []
    reaction_counts: dict[str, int] | None = None
    parent_id: str | None = None
    show_in_channel: bool = False
    reply_count: int = 0
    mentioned_users: NullableList[User] = []
    silent: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class SearchMessageResponse(ChatModel):
    message: Message


class SearchResponse(ChatModel):
    results: NullableList[SearchMessageResponse] = []
    next: str | None = None
    previous: str | None = None
