"""Async Python client for a hosted chat backend's query, search and moderation APIs."""

from streamchat_sdk.client import Client
from streamchat_sdk.errors import ChatHTTPError, ChatNetworkError, ChatValidationError
from streamchat_sdk.models.enums import SortDirection
from streamchat_sdk.models.query import QueryOption, SearchRequest, SortOption

__all__ = [
    "Client",
    "ChatHTTPError",
    "ChatNetworkError",
    "ChatValidationError",
    "QueryOption",
    "SearchRequest",
    "SortDirection",
    "SortOption",
]
