"""Drukarnia article search endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from matrux.drukarnia.models import Page, RecommendedArticle, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "/api/articles/search"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the article search endpoint."""
    return {
        "name": str(params["term"]),
        "page": str(params["page"]),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="search_articles",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing article search results."""

    def parse(self, response: bytes, params: dict[str, Any]) -> Page[RecommendedArticle]:
        items = decode(list[RecommendedArticle], response)
        return Page(number=params["page"], items=tuple(items))
