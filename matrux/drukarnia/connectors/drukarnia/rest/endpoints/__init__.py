"""Drukarnia REST endpoint registry.

This module collects the specification and adapter of every endpoint and
exposes them by endpoint id.
"""

from __future__ import annotations

from matrux.drukarnia.runtime.rest import ResponseAdapter, RestEndpointSpec

from .article import SPEC as ArticleSpec  # noqa: N811
from .article import Adapter as ArticleAdapter
from .comment_replies import SPEC as CommentRepliesSpec  # noqa: N811
from .comment_replies import Adapter as CommentRepliesAdapter
from .feed import SPEC as FeedSpec  # noqa: N811
from .feed import Adapter as FeedAdapter
from .followers import SPEC as FollowersSpec  # noqa: N811
from .followers import Adapter as FollowersAdapter
from .popular_tags import SPEC as PopularTagsSpec  # noqa: N811
from .popular_tags import Adapter as PopularTagsAdapter
from .search_articles import SPEC as SearchArticlesSpec  # noqa: N811
from .search_articles import Adapter as SearchArticlesAdapter
from .search_users import SPEC as SearchUsersSpec  # noqa: N811
from .search_users import Adapter as SearchUsersAdapter
from .tag import SPEC as TagSpec  # noqa: N811
from .tag import Adapter as TagAdapter
from .user_profile import SPEC as UserProfileSpec  # noqa: N811
from .user_profile import Adapter as UserProfileAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "feed": (FeedSpec, FeedAdapter),
    "search_articles": (SearchArticlesSpec, SearchArticlesAdapter),
    "search_users": (SearchUsersSpec, SearchUsersAdapter),
    "followers": (FollowersSpec, FollowersAdapter),
    "popular_tags": (PopularTagsSpec, PopularTagsAdapter),
    "user_profile": (UserProfileSpec, UserProfileAdapter),
    "tag": (TagSpec, TagAdapter),
    "article": (ArticleSpec, ArticleAdapter),
    "comment_replies": (CommentRepliesSpec, CommentRepliesAdapter),
}

# Endpoints that accept a page number and return a Page
PAGINATED_ENDPOINTS = frozenset({"feed", "search_articles", "search_users", "followers"})


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "feed", "article")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "feed", "article")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return sorted(_ENDPOINT_REGISTRY)


__all__ = [
    "PAGINATED_ENDPOINTS",
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
]
