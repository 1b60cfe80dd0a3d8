"""Shared fixtures: sample payloads and a scripted transport."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from typing import Any

import pytest

from matrux.drukarnia.runtime.rest import ResponseParts

CREATED_AT = "2023-05-06T10:00:00.000Z"


def oid(n: int) -> str:
    """Deterministic 24-digit hex object id."""
    return f"{n:024x}"


class Payloads:
    """Factories for JSON objects as the server sends them.

    Every factory returns a fresh dict, so tests can add or remove keys.
    """

    @staticmethod
    def relationships() -> dict[str, Any]:
        return {"isSubscribed": False, "isBlocked": False}

    @staticmethod
    def user_tag(n: int = 1) -> dict[str, Any]:
        return {"_id": oid(1000 + n), "name": f"Тег {n}", "slug": f"teh-{n}"}

    def article_tag(self, n: int = 1) -> dict[str, Any]:
        return {**self.user_tag(n), "createdAt": CREATED_AT, "mentionsNum": 12, "__v": 0}

    def popular_tag(self, n: int = 1) -> dict[str, Any]:
        return {**self.user_tag(n), "mentionsNum": 100 + n, "__v": 0}

    @staticmethod
    def comment_user(n: int = 1) -> dict[str, Any]:
        return {
            "_id": oid(2000 + n),
            "username": f"user{n}",
            "name": f"User {n}",
            "avatar": "https://cdn.drukarnia.com.ua/avatar.png",
        }

    def brief_user(self, n: int = 1) -> dict[str, Any]:
        return self.comment_user(n)

    def short_user(self, n: int = 1) -> dict[str, Any]:
        return {**self.brief_user(n), "relationships": self.relationships()}

    def follower(self, n: int = 1) -> dict[str, Any]:
        return {
            "_id": oid(3000 + n),
            "avatar": None,
            "username": f"follower{n}",
            "name": f"Follower {n}",
            "descriptionShort": None,
            "relationships": self.relationships(),
        }

    @staticmethod
    def article_user(n: int = 1) -> dict[str, Any]:
        return {
            "_id": oid(2000 + n),
            "name": f"Author {n}",
            "avatar": "https://cdn.drukarnia.com.ua/author.png",
            "descriptionShort": "Пишу про історію",
            "followingNum": 3,
            "followersNum": 42,
            "readNum": 1500,
            "username": f"author{n}",
            "createdAt": CREATED_AT,
            "socials": {"telegram": "https://t.me/author", "facebook": "not a link"},
            "donateUrl": "https://send.monobank.ua/jar/abc",
        }

    @staticmethod
    def _article_core(n: int) -> dict[str, Any]:
        return {
            "_id": oid(n),
            "title": f"Article {n}",
            "description": "Короткий опис",
            "slug": f"article-{n}",
            "mainTag": "Історія",
            "mainTagId": oid(1001),
            "mainTagSlug": "istoriya",
            "readTime": 240,
            "createdAt": CREATED_AT,
            "isBookmarked": False,
        }

    def feed_article(self, n: int = 1) -> dict[str, Any]:
        return {
            **self._article_core(n),
            "thumbPicture": None,
            "owner": self.comment_user(n),
            "tags": [self.user_tag(1), self.user_tag(2)],
            "sensitive": False,
            "likeNum": 7,
            "commentNum": 2,
        }

    def recommended_article(self, n: int = 1) -> dict[str, Any]:
        return {
            **self._article_core(n),
            "owner": self.article_user(n),
            "thumbPicture": "https://cdn.drukarnia.com.ua/thumb.png",
            "tags": [oid(1001)],
            "sensitive": False,
            "canonical": None,
            "likeNum": 7,
            "commentNum": 2,
        }

    def search_article(self, n: int = 1) -> dict[str, Any]:
        return {
            **self._article_core(n),
            "owner": oid(2001),
            "thumbPicture": None,
            "picture": None,
            "canonical": None,
        }

    def author_article(self, n: int = 1) -> dict[str, Any]:
        return {
            **self._article_core(n),
            "owner": oid(2001),
            "thumbPicture": None,
            "picture": "https://cdn.drukarnia.com.ua/picture.png",
            "tags": [oid(1001), oid(1002)],
            "canonical": None,
            "likeNum": 0,
            "commentNum": 0,
            "sensitive": False,
        }

    def short_article(self, n: int = 1) -> dict[str, Any]:
        return {
            **self._article_core(n),
            "owner": oid(2001),
            "thumbPicture": None,
            "tags": [oid(1001)],
            "sensitive": True,
            "likeNum": 1,
            "commentNum": 0,
        }

    def tag_article(self, n: int = 1) -> dict[str, Any]:
        return {**self.recommended_article(n), "relationships": self.relationships()}

    def article_comment(self, n: int = 1) -> dict[str, Any]:
        return {
            "_id": oid(4000 + n),
            "comment": "<p>Дякую за статтю!</p>",
            "owner": self.comment_user(n),
            "article": oid(1),
            "hiddenByAuthor": False,
            "replyNum": 1,
            "likesNum": 3,
            "createdAt": CREATED_AT,
            "isLiked": False,
            "isBlocked": False,
            "__v": 0,
        }

    def reply_comment(self, n: int = 1) -> dict[str, Any]:
        return {
            **self.article_comment(n),
            "replyNum": 0,
            "replyToComment": oid(4000),
            "replyToUser": oid(2000),
            "rootComment": oid(4000),
            "rootCommentOwner": oid(2000),
        }

    def full_article(self, n: int = 1) -> dict[str, Any]:
        return {
            **self._article_core(n),
            "seoTitle": f"Article {n} | Drukarnia",
            "owner": self.article_user(1),
            "picture": None,
            "thumbPicture": None,
            "tags": [self.article_tag(1)],
            "ads": None,
            "index": True,
            "sensitive": False,
            "canonical": None,
            "likeNum": 10,
            "commentNum": 1,
            "isLiked": 0,
            "relationships": self.relationships(),
            "authorArticles": [self.search_article(n + 1)],
            "recommendedArticles": [self.recommended_article(n + 2)],
            "comments": [self.article_comment(1)],
            "content": {"time": 1683367200000, "blocks": [{"type": "paragraph"}]},
        }

    def full_user(self, n: int = 1) -> dict[str, Any]:
        return {
            "_id": oid(2000 + n),
            "name": f"Author {n}",
            "avatar": None,
            "username": f"author{n}",
            "descriptionShort": None,
            "description": None,
            "followingNum": 3,
            "followersNum": 42,
            "readNum": 1500,
            "authorTags": [self.user_tag(1)],
            "createdAt": CREATED_AT,
            "socials": {},
            "relationships": self.relationships(),
            "articles": [self.author_article(1), self.author_article(2)],
        }

    def full_tag(self, n: int = 1) -> dict[str, Any]:
        return {
            **self.user_tag(n),
            "mentionsNum": 57,
            "relationships": self.relationships(),
            "articles": [self.tag_article(1), self.tag_article(2)],
        }


@dataclass(frozen=True)
class SentRequest:
    method: str
    path: str
    params: dict[str, Any] | None
    body: dict[str, Any] | None


class FakeTransport:
    """RESTTransport that replays queued responses and records every request."""

    def __init__(self) -> None:
        self.calls: list[SentRequest] = []
        self._queue: deque[ResponseParts | Exception] = deque()

    def respond(self, payload: Any = None, *, status: int = 200, raw: bytes | None = None) -> None:
        body = raw if raw is not None else json.dumps(payload).encode()
        self._queue.append(ResponseParts(status_code=status, body=body))

    def fail(self, exc: Exception) -> None:
        self._queue.append(exc)

    async def send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> ResponseParts:
        self.calls.append(SentRequest(method, path, params, body))
        if not self._queue:
            raise AssertionError(f"Unexpected request: {method} {path} {params}")
        item = self._queue.popleft()
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def payloads() -> Payloads:
    return Payloads()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
