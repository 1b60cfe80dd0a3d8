"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from ...core.exceptions import HttpError, NotFoundError
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    """Declarative description of one endpoint.

    Attributes:
        id: Endpoint identifier used by the registry and in logs
        method: HTTP method ("GET" | "POST")
        build_path: Builds the request path from params
        build_query: Builds query parameters from params
        build_body: Builds a JSON body from params
        not_found_statuses: Statuses the server uses to say the object is missing
    """

    id: str
    method: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    not_found_statuses: frozenset[int] = field(default_factory=frozenset)


class ResponseAdapter:
    def parse(self, response: bytes, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    """Executes one request per call: build, send, check status, parse.

    No caching and no retries; every error reaches the caller.
    """

    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None

        start = perf_counter()
        response = await self._t.send(spec.method.upper(), path, params=query, body=body)
        latency_ms = (perf_counter() - start) * 1000.0

        status = response.status_code
        if not 200 <= status < 300:
            logger.warning(
                "rest_request_failed",
                extra={"endpoint_id": spec.id, "path": path, "status": status},
            )
            if status in spec.not_found_statuses:
                raise NotFoundError(status, path)
            raise HttpError(status, path)

        logger.debug(
            "rest_request_completed",
            extra={
                "endpoint_id": spec.id,
                "path": path,
                "status": status,
                "latency_ms": latency_ms,
            },
        )
        return adapter.parse(response.body, params)
