"""User schema models.

The server returns a different subset of user fields depending on where the
user appears (search results, comments, followers, article authors, profile
page). Each subset is its own model so a missing or extra key is caught.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from .base import Count, IsoDatetime, Record, Relationships
from .primitives import (
    DisplayName,
    MaybeUrl,
    ShortDescription,
    UserDescription,
    UserId,
    UserName,
)
from .tag import UserTag

if TYPE_CHECKING:
    from .article import AuthorArticle


class BriefUser(Record):
    """User search result without relationships."""

    id: UserId = Field(alias="_id")
    username: UserName
    name: DisplayName
    avatar: MaybeUrl | None = None


class ShortUser(BriefUser):
    """User search result with relationships."""

    relationships: Relationships


class CommentUser(Record):
    """Author of a comment or of a feed article."""

    id: UserId = Field(alias="_id")
    username: UserName
    name: DisplayName
    avatar: MaybeUrl | None = None


class FollowerUser(Record):
    """Entry of a followers list.

    Deleted or half-registered accounts show up here with most keys missing.
    """

    id: UserId | None = Field(default=None, alias="_id")
    avatar: MaybeUrl | None = None
    username: UserName | None = None
    name: DisplayName | None = None
    short_description: ShortDescription | None = Field(alias="descriptionShort")
    relationships: Relationships


class ArticleUser(Record):
    """Author block attached to articles."""

    id: UserId = Field(alias="_id")
    name: DisplayName
    avatar: MaybeUrl | None = None
    short_description: ShortDescription | None = Field(alias="descriptionShort")
    following_num: Count = Field(alias="followingNum")
    followers_num: Count = Field(alias="followersNum")
    read_num: Count = Field(alias="readNum")
    username: UserName
    created_at: IsoDatetime = Field(alias="createdAt")
    socials: dict[str, MaybeUrl] = Field(default_factory=dict)
    donate_url: MaybeUrl | None = Field(default=None, alias="donateUrl")


class FullUser(Record):
    """Profile page of a user."""

    id: UserId = Field(alias="_id")
    name: DisplayName
    avatar: MaybeUrl | None = None
    username: UserName
    short_description: ShortDescription | None = Field(alias="descriptionShort")
    description: UserDescription | None
    following_num: Count = Field(alias="followingNum")
    followers_num: Count = Field(alias="followersNum")
    read_num: Count = Field(alias="readNum")
    author_tags: list[UserTag] = Field(alias="authorTags")
    created_at: IsoDatetime = Field(alias="createdAt")
    socials: dict[str, MaybeUrl] = Field(default_factory=dict)
    donate_url: MaybeUrl | None = Field(default=None, alias="donateUrl")
    relationships: Relationships
    articles: list[AuthorArticle]
