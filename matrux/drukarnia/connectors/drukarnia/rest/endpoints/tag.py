"""Drukarnia tag page endpoint definition and adapter."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from matrux.drukarnia.connectors.drukarnia.config import NOT_FOUND_STATUSES
from matrux.drukarnia.models import FullTag, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/api/articles/tags/{quote(str(params['tag_slug']), safe='')}"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    # the tag page embeds its first page of articles
    return {"page": "1"}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="tag",
    method="GET",
    build_path=build_path,
    build_query=build_query,
    not_found_statuses=NOT_FOUND_STATUSES,
)


class Adapter(ResponseAdapter):
    def parse(self, response: bytes, params: dict[str, Any]) -> FullTag:
        return decode(FullTag, response)
