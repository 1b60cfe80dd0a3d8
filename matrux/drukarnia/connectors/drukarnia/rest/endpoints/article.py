"""Drukarnia article page endpoint definition and adapter."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from matrux.drukarnia.connectors.drukarnia.config import NOT_FOUND_STATUSES
from matrux.drukarnia.models import FullArticle, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/api/articles/{quote(str(params['article_slug']), safe='')}"


# Endpoint specification
SPEC = RestEndpointSpec(
    id="article",
    method="GET",
    build_path=build_path,
    not_found_statuses=NOT_FOUND_STATUSES,
)


class Adapter(ResponseAdapter):
    def parse(self, response: bytes, params: dict[str, Any]) -> FullArticle:
        return decode(FullArticle, response)
