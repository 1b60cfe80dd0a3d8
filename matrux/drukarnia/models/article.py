"""Article schema models.

Architecture:
    The server serializes articles differently on nearly every page: search
    results carry the owner as a bare id, recommendations embed the author
    block, the feed embeds a short author and user tags, and the article page
    adds content, comments and related articles. Each of these is one model.

    All shapes share the fields in ``_ArticleBase``; the remaining fields are
    declared per shape, so nothing is optional just because another shape
    lacks it.
"""

from __future__ import annotations

from pydantic import Field, JsonValue, StrictBool

from .base import Count, IsoDatetime, LikeFlag, ReadTime, Record, Relationships
from .comment import ArticleComment
from .primitives import (
    ArticleDescription,
    ArticleId,
    ArticleSlug,
    ArticleTitle,
    MaybeUrl,
    SeoTitle,
    TagId,
    TagName,
    TagSlug,
    UserId,
)
from .tag import ArticleTag, UserTag
from .user import ArticleUser, CommentUser


class _ArticleBase(Record):
    id: ArticleId = Field(alias="_id")
    title: ArticleTitle
    description: ArticleDescription
    slug: ArticleSlug
    main_tag: TagName = Field(alias="mainTag")
    main_tag_id: TagId = Field(alias="mainTagId")
    main_tag_slug: TagSlug = Field(alias="mainTagSlug")
    read_time: ReadTime = Field(alias="readTime")
    created_at: IsoDatetime = Field(alias="createdAt")
    is_bookmarked: StrictBool = Field(alias="isBookmarked")


class SearchArticle(_ArticleBase):
    """Article as listed in "more from the author" on an article page."""

    owner: UserId
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    picture: MaybeUrl | None
    canonical: MaybeUrl | None
    pin_created_at: IsoDatetime | None = Field(default=None, alias="pinCreatedAt")


class AuthorArticle(_ArticleBase):
    """Article as listed on its author's profile."""

    owner: UserId
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    picture: MaybeUrl | None
    tags: list[TagId]
    canonical: MaybeUrl | None
    like_num: Count = Field(alias="likeNum")
    comment_num: Count = Field(alias="commentNum")
    sensitive: StrictBool
    pin_created_at: IsoDatetime | None = Field(default=None, alias="pinCreatedAt")


class RecommendedArticle(_ArticleBase):
    """Article search result or recommendation."""

    owner: ArticleUser
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    tags: list[TagId]
    sensitive: StrictBool
    canonical: MaybeUrl | None
    like_num: Count = Field(alias="likeNum")
    comment_num: Count = Field(alias="commentNum")


class ShortArticle(_ArticleBase):
    owner: UserId
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    tags: list[TagId]
    sensitive: StrictBool
    like_num: Count = Field(alias="likeNum")
    comment_num: Count = Field(alias="commentNum")


class TagArticle(_ArticleBase):
    """Article as listed on a tag page."""

    owner: ArticleUser
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    tags: list[TagId]
    sensitive: StrictBool
    canonical: MaybeUrl | None
    like_num: Count = Field(alias="likeNum")
    comment_num: Count = Field(alias="commentNum")
    relationships: Relationships


class FeedArticle(_ArticleBase):
    """Entry of the article feed."""

    owner: CommentUser
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    tags: list[UserTag]
    sensitive: StrictBool
    like_num: Count = Field(alias="likeNum")
    comment_num: Count = Field(alias="commentNum")


class FullArticle(_ArticleBase):
    """Article page.

    ``content`` is the editor document as sent by the server, kept as plain
    JSON data.
    """

    seo_title: SeoTitle = Field(alias="seoTitle")
    owner: ArticleUser
    picture: MaybeUrl | None
    thumb_picture: MaybeUrl | None = Field(alias="thumbPicture")
    tags: list[ArticleTag]
    ads: StrictBool | None
    index: StrictBool | None
    sensitive: StrictBool
    canonical: MaybeUrl | None
    like_num: Count = Field(alias="likeNum")
    comment_num: Count = Field(alias="commentNum")
    is_liked: LikeFlag = Field(alias="isLiked")
    relationships: Relationships
    author_articles: list[SearchArticle] = Field(alias="authorArticles")
    recommended_articles: list[RecommendedArticle] = Field(alias="recommendedArticles")
    comments: list[ArticleComment]
    content: JsonValue
