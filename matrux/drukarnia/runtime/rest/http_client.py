"""aiohttp-backed REST transport."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import TransportError
from .transport import ResponseParts

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper implementing RESTTransport.

    The session is created lazily on first use and recreated if it was
    closed. Relative paths are joined to ``base_url``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        user_agent: str | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers: dict[str, str] = {"User-Agent": user_agent} if user_agent else {}
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def url_for(self, path: str) -> str:
        if self.base_url and not path.startswith(("http://", "https://")):
            return f"{self.base_url}/{path.lstrip('/')}"
        return path

    async def send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> ResponseParts:
        """Perform one request and return its status and raw body.

        Raises:
            TransportError: If no response could be obtained
        """
        url = self.url_for(path)
        try:
            async with self.session.request(
                method.upper(), url, params=params, json=body
            ) as response:
                payload = await response.read()
                return ResponseParts(status_code=response.status, body=payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.debug(
                "http_transport_error",
                extra={"method": method, "url": url, "error_type": type(exc).__name__},
            )
            raise TransportError(f"{method.upper()} {url} failed: {exc!r}") from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
