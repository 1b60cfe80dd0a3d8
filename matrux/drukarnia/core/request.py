"""Request values: page numbers, search terms and paginated queries.

Architecture:
    Everything a caller hands to the client before a request is built lives
    here. Values are frozen dataclasses validated in ``__post_init__`` so an
    invalid page number or search term fails at construction, before any
    network call.

Design Decisions:
    - Invalid values raise ValidationError; nothing is clamped or trimmed
    - Queries carry only what is needed to build a request; the page being
      fetched is passed separately so the same query can address any page
    - Each query names its endpoint through a class-level ``endpoint_id``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ..models.primitives import UserId
from .exceptions import ValidationError

if TYPE_CHECKING:
    from ..models import BriefUser, FeedArticle, FollowerUser, RecommendedArticle, ShortUser

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class PageNumber:
    """One-based page index of a paginated resource."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not pass as page 1
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Page number must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Page number must be >= 1, got {self.value}")

    @classmethod
    def of(cls, value: PageNumber | int) -> PageNumber:
        """Return ``value`` as a PageNumber, validating plain integers."""
        if isinstance(value, PageNumber):
            return value
        return cls(value)

    def next(self) -> PageNumber:
        return PageNumber(self.value + 1)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


FIRST_PAGE = PageNumber(1)


@dataclass(frozen=True)
class SearchTerm:
    """Free-text search input. Must contain at least one non-blank character."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise ValidationError(f"Search term must be a string, got {type(self.text).__name__}")
        if not self.text.strip():
            raise ValidationError("Search term must not be empty")

    @classmethod
    def of(cls, value: SearchTerm | str) -> SearchTerm:
        if isinstance(value, SearchTerm):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, kw_only=True)
class PageQuery(Generic[T]):
    """Base for paginated queries.

    Attributes:
        start_page: First page a stream built from this query fetches
    """

    endpoint_id: ClassVar[str]

    start_page: PageNumber = FIRST_PAGE

    def __post_init__(self) -> None:
        if not isinstance(self.start_page, PageNumber):
            object.__setattr__(self, "start_page", PageNumber.of(self.start_page))

    def params(self) -> dict[str, Any]:
        """Endpoint parameters, excluding the page number."""
        return {}


@dataclass(frozen=True, kw_only=True)
class FeedQuery(PageQuery["FeedArticle"]):
    """The site-wide article feed."""

    endpoint_id: ClassVar[str] = "feed"


@dataclass(frozen=True, kw_only=True)
class ArticleSearchQuery(PageQuery["RecommendedArticle"]):
    """Search articles by title."""

    endpoint_id: ClassVar[str] = "search_articles"

    term: SearchTerm

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "term", SearchTerm.of(self.term))

    def params(self) -> dict[str, Any]:
        return {"term": self.term}


@dataclass(frozen=True, kw_only=True)
class UserSearchQuery(PageQuery["ShortUser | BriefUser"]):
    """Search users by name.

    The server returns a different shape depending on ``with_relationships``:
    ShortUser when it is set, BriefUser otherwise.
    """

    endpoint_id: ClassVar[str] = "search_users"

    term: SearchTerm
    with_relationships: bool = True

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "term", SearchTerm.of(self.term))
        if not isinstance(self.with_relationships, bool):
            raise ValidationError("with_relationships must be a bool")

    def params(self) -> dict[str, Any]:
        return {"term": self.term, "with_relationships": self.with_relationships}


@dataclass(frozen=True, kw_only=True)
class FollowersQuery(PageQuery["FollowerUser"]):
    """Followers of one user."""

    endpoint_id: ClassVar[str] = "followers"

    user: UserId

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.user, UserId):
            raise TypeError(f"FollowersQuery.user must be a UserId, got {type(self.user).__name__}")

    def params(self) -> dict[str, Any]:
        return {"user_id": self.user}
