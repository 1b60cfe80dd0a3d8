"""Drukarnia comment replies endpoint definition and adapter.

The path nominally contains the article id, but the server resolves the
comment on its own, so a placeholder id is sent instead.
"""

from __future__ import annotations

from typing import Any

from matrux.drukarnia.connectors.drukarnia.config import (
    PLACEHOLDER_ARTICLE_ID,
    REPLIES_NOT_FOUND_STATUSES,
)
from matrux.drukarnia.models import ReplyComment, decode
from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/api/articles/{PLACEHOLDER_ARTICLE_ID}/comments/{params['comment_id']}/replies"


# Endpoint specification
SPEC = RestEndpointSpec(
    id="comment_replies",
    method="GET",
    build_path=build_path,
    not_found_statuses=REPLIES_NOT_FOUND_STATUSES,
)


class Adapter(ResponseAdapter):
    def parse(self, response: bytes, params: dict[str, Any]) -> list[ReplyComment]:
        return decode(list[ReplyComment], response)
