from datetime import datetime
from typing import Any

from streamchat_sdk.models.base import ChatModel, NullableList
from streamchat_sdk.models.messages import Message
from streamchat_sdk.models.users import User


class MessageFlag(ChatModel):
    created_by_automod: bool = False
    moderation_result: dict[str, Any] | None = None
    user: User | None = None
    message: Message | None = None
    reviewed_by: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    reviewed_at: datetime | None = None
    approved_at: datetime | None = None
    rejected_at: datetime | None = None


class QueryMessageFlagsResponse(ChatModel):
    flags: NullableList[MessageFlag] = []
