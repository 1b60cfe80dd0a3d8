"""Comment schema models.

The comment body is HTML produced by the site's editor. It is kept as the raw
string; rendering or parsing it is up to the caller.
"""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictStr

from .base import Count, IsoDatetime, Record
from .primitives import ArticleId, CommentId, UserId
from .user import CommentUser


class _CommentBase(Record):
    id: CommentId = Field(alias="_id")
    comment: StrictStr
    article: ArticleId
    hidden_by_author: StrictBool = Field(alias="hiddenByAuthor")
    reply_num: Count = Field(alias="replyNum")
    likes_num: Count = Field(alias="likesNum")
    created_at: IsoDatetime = Field(alias="createdAt")
    is_liked: StrictBool = Field(alias="isLiked")
    is_blocked: StrictBool = Field(alias="isBlocked")
    version: Count = Field(alias="__v")


class ArticleComment(_CommentBase):
    """Top-level comment embedded in a full article."""

    # null for comments of deleted accounts
    owner: CommentUser | None


class ReplyComment(_CommentBase):
    """Reply to a comment."""

    owner: CommentUser
    reply_to_comment: CommentId = Field(alias="replyToComment")
    reply_to_user: UserId = Field(alias="replyToUser")
    root_comment: CommentId = Field(alias="rootComment")
    root_comment_owner: UserId = Field(alias="rootCommentOwner")
