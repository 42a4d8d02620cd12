"""Users API methods."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from streamchat_sdk.models.query import QueryOption, QueryRequest, SortOption
from streamchat_sdk.models.users import QueryUsersResponse, User

if TYPE_CHECKING:
    from streamchat_sdk.http import HTTPClient

log = logging.getLogger(__name__)


class UsersAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def query(self, q: QueryOption, *sort: SortOption) -> list[User]:
        """Return the users matching ``q``.

        Results are ordered by ``sort`` (first entry is the primary key), or by
        ``q.sort`` when no sort arguments are given.
        """
        request = QueryRequest.from_option(q, list(sort) or q.sort)
        log.debug("Querying users: %s", request.filter_conditions)
        r = await self._http.get("users", params={"payload": request.to_json()})
        return QueryUsersResponse.model_validate(r.json()).users
