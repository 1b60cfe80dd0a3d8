"""Drukarnia feed endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from matrux.drukarnia.models import FeedArticle, Page, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "/api/preferences/feed"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"page": str(params["page"])}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="feed",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a feed page into FeedArticle records."""

    def parse(self, response: bytes, params: dict[str, Any]) -> Page[FeedArticle]:
        items = decode(list[FeedArticle], response)
        return Page(number=params["page"], items=tuple(items))
