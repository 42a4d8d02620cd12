from pydantic import Field

from streamchat_sdk.models.base import ChatModel


class APIError(ChatModel):
    """Error body returned by the backend on non-2xx responses."""

    code: int = 0
    message: str = ""
    status_code: int | None = Field(default=None, alias="StatusCode")
    duration: str | None = None
    more_info: str | None = None
