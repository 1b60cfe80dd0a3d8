"""Tag schema models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, StrictBool

from .base import Count, IsoDatetime, Record, Relationships
from .primitives import TagId, TagName, TagSlug

if TYPE_CHECKING:
    from .article import TagArticle


class _TagBase(Record):
    id: TagId = Field(alias="_id")
    name: TagName
    slug: TagSlug


class UserTag(_TagBase):
    """Tag as listed on a user profile or a feed article."""


class ArticleTag(_TagBase):
    """Tag attached to a full article."""

    created_at: IsoDatetime = Field(alias="createdAt")
    mentions_num: Count = Field(alias="mentionsNum")
    version: Count = Field(alias="__v")
    # omitted by the server for most tags
    default: StrictBool = False
    ignore: StrictBool = False
    general: StrictBool | None = None


class PopularTag(_TagBase):
    """Entry of the popular tags list."""

    mentions_num: Count = Field(alias="mentionsNum")
    version: Count = Field(alias="__v")


class FullTag(_TagBase):
    """Tag page: the tag itself plus its first page of articles."""

    mentions_num: Count = Field(alias="mentionsNum")
    relationships: Relationships
    articles: list[TagArticle]
