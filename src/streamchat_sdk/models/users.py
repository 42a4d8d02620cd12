from datetime import datetime

from streamchat_sdk.models.base import ChatModel, NullableList


class User(ChatModel):
    id: str
    name: str | None = None
    image: str | None = None
    role: str | None = None
    teams: NullableList[str] = []
    online: bool = False
    invisible: bool = False
    banned: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_active: datetime | None = None


class QueryUsersResponse(ChatModel):
    users: NullableList[User] = []
