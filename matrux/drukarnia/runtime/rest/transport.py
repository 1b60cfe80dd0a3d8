"""REST transport protocol.

The core never talks to aiohttp directly. It hands a method, a path and
query parameters to a transport and gets back a status code and the raw
body. HTTPClient is the default implementation; tests and callers with their
own HTTP stack can pass anything that has a matching ``send``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class ResponseParts:
    """Status code and raw body of an HTTP response."""

    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class RESTTransport(Protocol):
    """Anything able to perform one HTTP request.

    Implementations raise TransportError when no response could be obtained
    (connection refused, DNS failure, timeout). Non-2xx responses are not
    errors at this level; they are returned like any other response.
    """

    async def send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> ResponseParts: ...
