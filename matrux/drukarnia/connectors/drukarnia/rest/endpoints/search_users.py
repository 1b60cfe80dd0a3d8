"""Drukarnia user search endpoint definition and adapter.

The response shape depends on the ``withRelationships`` flag: with it set
every user carries a ``relationships`` object (ShortUser), without it the
key is absent (BriefUser).
"""

from __future__ import annotations

from typing import Any

from matrux.drukarnia.models import BriefUser, Page, ShortUser, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "/api/users/info"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the user search endpoint."""
    return {
        "name": str(params["term"]),
        "page": str(params["page"]),
        "withRelationships": "true" if params["with_relationships"] else "false",
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="search_users",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing user search results into ShortUser or BriefUser."""

    def parse(self, response: bytes, params: dict[str, Any]) -> Page[ShortUser | BriefUser]:
        shape = ShortUser if params["with_relationships"] else BriefUser
        items = decode(list[shape], response)  # type: ignore[valid-type]
        return Page(number=params["page"], items=tuple(items))
