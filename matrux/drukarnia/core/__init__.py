"""Core components."""

from .base import BaseClient
from .exceptions import (
    ApiError,
    DeserializationError,
    DrukarniaError,
    FieldIssue,
    HttpError,
    MissingField,
    NotFoundError,
    TransportError,
    TypeMismatch,
    UnknownField,
    ValidationError,
)
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

__all__ = [
    "BaseClient",
    # Errors
    "ApiError",
    "DeserializationError",
    "DrukarniaError",
    "FieldIssue",
    "HttpError",
    "MissingField",
    "NotFoundError",
    "TransportError",
    "TypeMismatch",
    "UnknownField",
    "ValidationError",
    # Request values
    "FIRST_PAGE",
    "ArticleSearchQuery",
    "FeedQuery",
    "FollowersQuery",
    "PageNumber",
    "PageQuery",
    "SearchTerm",
    "UserSearchQuery",
]
