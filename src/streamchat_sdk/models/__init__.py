"""SDK request and response models."""

from streamchat_sdk.models.base import ChatModel
from streamchat_sdk.models.errors import APIError
from streamchat_sdk.models.enums import SortDirection
from streamchat_sdk.models.query import QueryOption, QueryRequest, SearchRequest, SortOption
from streamchat_sdk.models.users import QueryUsersResponse, User
from streamchat_sdk.models.messages import (
    Message,
    Reaction,
    SearchMessageResponse,
    SearchResponse,
)
from streamchat_sdk.models.channels import (
    Channel,
    ChannelMember,
    ChannelRead,
    ChannelStateResponse,
    QueryChannelsResponse,
)
from streamchat_sdk.models.moderation import MessageFlag, QueryMessageFlagsResponse

__all__ = [
    "ChatModel",
    "APIError",
    # query
    "QueryOption",
    "QueryRequest",
    "SearchRequest",
    "SortDirection",
    "SortOption",
    # users
    "QueryUsersResponse",
    "User",
    # messages
    "Message",
    "Reaction",
    "SearchMessageResponse",
    "SearchResponse",
    # channels
    "Channel",
    "ChannelMember",
    "ChannelRead",
    "ChannelStateResponse",
    "QueryChannelsResponse",
    # moderation
    "MessageFlag",
    "QueryMessageFlagsResponse",
]
