"""Data models for Drukarnia API responses.

Architecture:
    This module exports all Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True) and reject unknown keys
    (extra="forbid"), so any change of the upstream API surfaces as a
    DeserializationError instead of silently lost or defaulted data.

Design Decisions:
    - Pydantic v2: type validation, aliases for wire names, immutable models
    - One model per observed response shape, never a union of shapes
    - Distinct newtypes per identifier kind and per kind of text
    - Nullable keys are still required unless the server is known to omit them

Model Categories:
    - Scalars: ArticleId, UserId, TagId, CommentId, text newtypes, MaybeUrl
    - Articles: SearchArticle, AuthorArticle, RecommendedArticle, ShortArticle,
      TagArticle, FeedArticle, FullArticle
    - Users: BriefUser, ShortUser, CommentUser, FollowerUser, ArticleUser, FullUser
    - Tags: ArticleTag, UserTag, PopularTag, FullTag
    - Comments: ArticleComment, ReplyComment
    - Pagination: Page

See Also:
    - Pydantic documentation: https://docs.pydantic.dev/
    - decode(): strict decoding entry point
"""

from .article import (
    AuthorArticle,
    FeedArticle,
    FullArticle,
    RecommendedArticle,
    SearchArticle,
    ShortArticle,
    TagArticle,
)
from .base import Count, IsoDatetime, LikeFlag, ReadTime, Record, Relationships, WireModel
from .comment import ArticleComment, ReplyComment
from .decode import decode
from .page import Page
from .primitives import (
    ArticleDescription,
    ArticleId,
    ArticleSlug,
    ArticleTitle,
    CommentId,
    DisplayName,
    MaybeUrl,
    SeoTitle,
    ShortDescription,
    TagId,
    TagName,
    TagSlug,
    UserDescription,
    UserId,
    UserName,
)
from .tag import ArticleTag, FullTag, PopularTag, UserTag
from .user import ArticleUser, BriefUser, CommentUser, FollowerUser, FullUser, ShortUser

# user.py and tag.py reference article models that import them back
FullUser.model_rebuild(_types_namespace={"AuthorArticle": AuthorArticle})
FullTag.model_rebuild(_types_namespace={"TagArticle": TagArticle})

__all__ = [
    # Scalars
    "ArticleDescription",
    "ArticleId",
    "ArticleSlug",
    "ArticleTitle",
    "CommentId",
    "Count",
    "DisplayName",
    "IsoDatetime",
    "LikeFlag",
    "MaybeUrl",
    "ReadTime",
    "Relationships",
    "SeoTitle",
    "ShortDescription",
    "TagId",
    "TagName",
    "TagSlug",
    "UserDescription",
    "UserId",
    "UserName",
    # Bases
    "Record",
    "WireModel",
    # Articles
    "AuthorArticle",
    "FeedArticle",
    "FullArticle",
    "RecommendedArticle",
    "SearchArticle",
    "ShortArticle",
    "TagArticle",
    # Users
    "ArticleUser",
    "BriefUser",
    "CommentUser",
    "FollowerUser",
    "FullUser",
    "ShortUser",
    # Tags
    "ArticleTag",
    "FullTag",
    "PopularTag",
    "UserTag",
    # Comments
    "ArticleComment",
    "ReplyComment",
    # Pagination
    "Page",
    "decode",
]
