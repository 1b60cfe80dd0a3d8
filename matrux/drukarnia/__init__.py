"""Matrux Drukarnia - typed, read-only client for the Drukarnia JSON API."""

# core first: runtime and connectors import core submodules during init
from .core import (
    FIRST_PAGE,
    ApiError,
    ArticleSearchQuery,
    BaseClient,
    DeserializationError,
    DrukarniaError,
    FeedQuery,
    FollowersQuery,
    HttpError,
    MissingField,
    NotFoundError,
    PageNumber,
    PageQuery,
    SearchTerm,
    TransportError,
    TypeMismatch,
    UnknownField,
    UserSearchQuery,
    ValidationError,
)
from .models import (
    ArticleComment,
    ArticleId,
    ArticleSlug,
    ArticleTag,
    ArticleUser,
    AuthorArticle,
    BriefUser,
    CommentId,
    CommentUser,
    FeedArticle,
    FollowerUser,
    FullArticle,
    FullTag,
    FullUser,
    MaybeUrl,
    Page,
    PopularTag,
    RecommendedArticle,
    ReplyComment,
    SearchArticle,
    ShortArticle,
    ShortUser,
    TagArticle,
    TagId,
    TagSlug,
    UserId,
    UserName,
    UserTag,
    decode,
)
from .runtime import (
    HTTPClient,
    ItemStream,
    PageStream,
    ResponseParts,
    RESTTransport,
    StreamState,
)
from .connectors.drukarnia import DrukarniaRESTConnector

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "BaseClient",
    "DrukarniaRESTConnector",
    # Requests
    "FIRST_PAGE",
    "ArticleSearchQuery",
    "FeedQuery",
    "FollowersQuery",
    "PageNumber",
    "PageQuery",
    "SearchTerm",
    "UserSearchQuery",
    # Errors
    "ApiError",
    "DeserializationError",
    "DrukarniaError",
    "HttpError",
    "MissingField",
    "NotFoundError",
    "TransportError",
    "TypeMismatch",
    "UnknownField",
    "ValidationError",
    # Models
    "ArticleComment",
    "ArticleId",
    "ArticleSlug",
    "ArticleTag",
    "ArticleUser",
    "AuthorArticle",
    "BriefUser",
    "CommentId",
    "CommentUser",
    "FeedArticle",
    "FollowerUser",
    "FullArticle",
    "FullTag",
    "FullUser",
    "MaybeUrl",
    "Page",
    "PopularTag",
    "RecommendedArticle",
    "ReplyComment",
    "SearchArticle",
    "ShortArticle",
    "ShortUser",
    "TagArticle",
    "TagId",
    "TagSlug",
    "UserId",
    "UserName",
    "UserTag",
    "decode",
    # Runtime
    "HTTPClient",
    "ItemStream",
    "PageStream",
    "RESTTransport",
    "ResponseParts",
    "StreamState",
]
