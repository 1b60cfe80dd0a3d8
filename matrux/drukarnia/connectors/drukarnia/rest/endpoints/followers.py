"""Drukarnia followers endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from matrux.drukarnia.models import FollowerUser, Page, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/api/relationships/{params['user_id']}/followers"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"page": str(params["page"])}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="followers",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a followers page."""

    def parse(self, response: bytes, params: dict[str, Any]) -> Page[FollowerUser]:
        items = decode(list[FollowerUser], response)
        return Page(number=params["page"], items=tuple(items))
