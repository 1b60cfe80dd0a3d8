"""Drukarnia popular tags endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from matrux.drukarnia.models import PopularTag, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "/api/articles/tags/popular"


# Endpoint specification
SPEC = RestEndpointSpec(
    id="popular_tags",
    method="GET",
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    def parse(self, response: bytes, params: dict[str, Any]) -> list[PopularTag]:
        return decode(list[PopularTag], response)
