"""Base client abstract class.

Architecture:
    This module defines the BaseClient abstract base class. It provides:
    - Abstract methods for core operations (fetch_page, close)
    - Concrete stream builders for every paginated collection
    - Async context manager support

Design Decisions:
    - Abstract base class: the stream logic is written once against
      fetch_page, whatever transport a concrete client uses
    - Async context manager: ensures the transport is closed
    - Queries are built here so invalid input fails before any stream exists

See Also:
    - DrukarniaRESTConnector: REST implementation with single-object lookups
    - PageStream: the async iterator returned by the stream builders
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import TYPE_CHECKING, TypeVar

from ..runtime.pagination.stream import PageStream
from .request import (
    FIRST_PAGE,
    ArticleSearchQuery,
    FeedQuery,
    FollowersQuery,
    PageNumber,
    PageQuery,
    SearchTerm,
    UserSearchQuery,
)

if TYPE_CHECKING:
    from ..models import BriefUser, FeedArticle, FollowerUser, RecommendedArticle, ShortUser
    from ..models.page import Page
    from ..models.primitives import UserId

T = TypeVar("T")


class BaseClient(ABC):
    """Abstract base class for API clients.

    Subclasses implement fetch_page for their transport; all paginated
    collections are then available as PageStreams.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def fetch_page(self, query: PageQuery[T], page_number: PageNumber | int) -> Page[T]:
        """Fetch one page of the collection described by ``query``.

        Exactly one network call per invocation.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections and cleanup resources."""
        pass

    def stream(self, query: PageQuery[T]) -> PageStream[T]:
        """Stream the pages of ``query`` starting at ``query.start_page``."""
        if not isinstance(query, PageQuery):
            raise TypeError(f"Expected a PageQuery, got {type(query).__name__}")
        return PageStream(
            partial(self.fetch_page, query),
            start_page=query.start_page,
            label=query.endpoint_id,
        )

    def feed(self, *, start_page: PageNumber | int = FIRST_PAGE) -> PageStream[FeedArticle]:
        """Stream the article feed."""
        return self.stream(FeedQuery(start_page=start_page))

    def search_articles(
        self,
        term: SearchTerm | str,
        *,
        start_page: PageNumber | int = FIRST_PAGE,
    ) -> PageStream[RecommendedArticle]:
        """Stream article search results.

        Raises:
            ValidationError: If ``term`` is blank
        """
        return self.stream(ArticleSearchQuery(term=term, start_page=start_page))

    def search_users(
        self,
        term: SearchTerm | str,
        *,
        with_relationships: bool = True,
        start_page: PageNumber | int = FIRST_PAGE,
    ) -> PageStream[ShortUser | BriefUser]:
        """Stream user search results.

        Items are ShortUser when ``with_relationships`` is set, BriefUser
        otherwise.
        """
        return self.stream(
            UserSearchQuery(
                term=term, with_relationships=with_relationships, start_page=start_page
            )
        )

    def followers(
        self,
        user: UserId,
        *,
        start_page: PageNumber | int = FIRST_PAGE,
    ) -> PageStream[FollowerUser]:
        """Stream the followers of ``user``.

        Raises:
            TypeError: If ``user`` is not a UserId
        """
        return self.stream(FollowersQuery(user=user, start_page=start_page))

    async def __aenter__(self) -> BaseClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
