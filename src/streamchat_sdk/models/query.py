"""Caller-facing query options and the wire requests built from them."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, TypeAdapter

from streamchat_sdk.models.base import ChatModel
from streamchat_sdk.models.enums import SortDirection

_json_object = TypeAdapter(dict[str, Any])


class SortOption(ChatModel):
    """Sort by ``field`` (a backend JSON field name, e.g. ``created_at``)."""

    model_config = ConfigDict(extra="forbid")

    field: str
    direction: SortDirection = SortDirection.ASC


class QueryOption(ChatModel):
    """Filter, sort and pagination options for users, channels and flags queries.

    ``limit`` and ``offset`` of zero mean "use the server default".
    ``message_limit`` and ``member_limit`` are None when unset so an explicit
    zero can still be sent.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    filter: dict[str, Any] = {}
    sort: list[SortOption] = []
    user_id: str | None = None
    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    message_limit: int | None = Field(default=None, ge=0)
    member_limit: int | None = Field(default=None, ge=0)


class QueryRequest(ChatModel):
    """Envelope sent to the query endpoints. Unset fields are left out."""

    watch: bool = False
    state: bool = False
    presence: bool = False

    user_id: str | None = None
    limit: int | None = None
    offset: int | None = None
    member_limit: int | None = None
    message_limit: int | None = None

    filter_conditions: dict[str, Any] | None = None
    sort: list[SortOption] | None = None

    @classmethod
    def from_option(cls, q: QueryOption, sort: list[SortOption] | None = None, **fields: Any) -> QueryRequest:
        """Start an envelope from the filter and pagination every query shares."""
        return cls(
            filter_conditions=q.filter or None,
            sort=sort or None,
            limit=q.limit or None,
            offset=q.offset or None,
            **fields,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class SearchRequest(ChatModel):
    """Message search across the channels matched by ``filters``.

    Give either ``query`` (free text) or ``message_filters``, never both.
    Paginate with ``limit``/``offset`` or with the ``next`` cursor; ``offset``
    cannot be combined with ``next`` or ``sort``.
    """

    model_config = ConfigDict(extra="forbid")

    query: str = ""
    filters: dict[str, Any] = Field(default_factory=dict, alias="filter_conditions")
    message_filters: dict[str, Any] = Field(
        default_factory=dict, alias="message_filter_conditions"
    )

    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    next: str = ""

    sort: list[SortOption] = []

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": self.query, "filter_conditions": self.filters}
        if self.message_filters:
            payload["message_filter_conditions"] = self.message_filters
        if self.limit:
            payload["limit"] = self.limit
        if self.offset:
            payload["offset"] = self.offset
        if self.next:
            payload["next"] = self.next
        if self.sort:
            payload["sort"] = [s.model_dump(mode="json") for s in self.sort]
        return payload

    def to_json(self) -> str:
        return _json_object.dump_json(self.to_payload()).decode()
