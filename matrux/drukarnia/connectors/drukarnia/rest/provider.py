"""Drukarnia REST connector.

Architecture:
    This connector uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests. Paginated collections go
    through fetch_page, which BaseClient turns into PageStreams; single
    objects have their own lookup methods.
"""

from __future__ import annotations

from typing import Any, TypeVar

from matrux.drukarnia.connectors.drukarnia.config import BASE_URL, DEFAULT_TIMEOUT, USER_AGENT
from matrux.drukarnia.core import BaseClient, PageNumber, PageQuery
from matrux.drukarnia.models import (
    ArticleSlug,
    CommentId,
    FullArticle,
    FullTag,
    FullUser,
    Page,
    PopularTag,
    ReplyComment,
    TagSlug,
    UserName,
)
from matrux.drukarnia.runtime.rest import HTTPClient, RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec

T = TypeVar("T")


def _require(value: Any, expected: type, argument: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"{argument} must be a {expected.__name__}, got {type(value).__name__}")


class DrukarniaRESTConnector(BaseClient):
    """Read-only client for the Drukarnia JSON API.

    Example:
        >>> async with DrukarniaRESTConnector() as client:
        ...     async for article in client.feed().flatten():
        ...         print(article.title)
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize Drukarnia REST connector.

        Args:
            base_url: Site root all API paths are joined to
            timeout: Total timeout per request in seconds
            user_agent: User-Agent header sent with every request
            transport: Alternative transport; when given, base_url, timeout
                and user_agent are ignored and the caller keeps ownership
        """
        super().__init__("drukarnia")
        self._owns_transport = transport is None
        self._transport: RESTTransport = transport or HTTPClient(
            base_url=base_url, timeout=timeout, user_agent=user_agent
        )
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a Drukarnia REST endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "feed", "article")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        adapter = adapter_cls()
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def fetch_page(self, query: PageQuery[T], page_number: PageNumber | int) -> Page[T]:
        """Fetch one page of a paginated collection.

        Args:
            query: Collection to fetch from
            page_number: Page to fetch, starting at 1

        Returns:
            Page of decoded items (possibly empty)

        Raises:
            ValidationError: If page_number is not a valid page number
            HttpError: On a non-success status
            DeserializationError: If the body does not match the schema
        """
        _require(query, PageQuery, "query")
        page = PageNumber.of(page_number)
        params = {**query.params(), "page": page}
        result: Page[T] = await self.fetch(query.endpoint_id, params)
        return result

    async def popular_tags(self) -> list[PopularTag]:
        """Fetch the list of popular tags."""
        data = await self.fetch("popular_tags", {})
        return list(data)

    async def get_user(self, name: UserName) -> FullUser:
        """Fetch the profile page of a user.

        Raises:
            TypeError: If name is not a UserName
            NotFoundError: If there is no such user
        """
        _require(name, UserName, "name")
        result: FullUser = await self.fetch("user_profile", {"user_name": name})
        return result

    async def get_tag(self, slug: TagSlug) -> FullTag:
        """Fetch a tag with its first page of articles.

        Raises:
            TypeError: If slug is not a TagSlug
            NotFoundError: If there is no such tag
        """
        _require(slug, TagSlug, "slug")
        result: FullTag = await self.fetch("tag", {"tag_slug": slug})
        return result

    async def get_article(self, slug: ArticleSlug) -> FullArticle:
        """Fetch an article page.

        Raises:
            TypeError: If slug is not an ArticleSlug
            NotFoundError: If there is no such article
        """
        _require(slug, ArticleSlug, "slug")
        result: FullArticle = await self.fetch("article", {"article_slug": slug})
        return result

    async def get_replies(self, comment: CommentId) -> list[ReplyComment]:
        """Fetch the replies to a comment.

        Raises:
            TypeError: If comment is not a CommentId
            NotFoundError: If there is no such comment
        """
        _require(comment, CommentId, "comment")
        data = await self.fetch("comment_replies", {"comment_id": comment})
        return list(data)

    async def close(self) -> None:
        """Close the HTTP session if this connector created it."""
        if self._owns_transport and isinstance(self._transport, HTTPClient):
            await self._transport.close()
