"""Scalar newtypes shared by all schema models.

Architecture:
    Every identifier kind and every meaningful piece of text gets its own
    pydantic RootModel subclass. The same raw string therefore produces
    values that never compare equal across kinds, and a UserId can never be
    passed where an ArticleId is expected without a type checker noticing.

Design Decisions:
    - Frozen root models: hashable, usable as dict keys and set members
    - Equality and hashing include the kind; ordering raises TypeError across
      kinds instead of silently comparing raw values
    - Identifiers only expose one-directional exits (``str()``, ``as_bytes()``)
    - Malformed user links never fail decoding (MaybeUrl keeps the source)
"""

from __future__ import annotations

from typing import Annotated

import pydantic
from pydantic import (
    AfterValidator,
    AnyUrl,
    ConfigDict,
    RootModel,
    StrictStr,
    StringConstraints,
    TypeAdapter,
)

# 12-byte object id, hex encoded
HexObjectId = Annotated[
    StrictStr,
    StringConstraints(pattern=r"^[0-9a-fA-F]{24}$"),
    AfterValidator(str.lower),
]


class _Wrapped:
    """Behaviour shared by all newtypes: kind-checked ordering and plain ``str()``."""

    def _require_same_kind(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot order {type(self).__name__} against {type(other).__name__}"
            )

    def __lt__(self, other: object) -> bool:
        self._require_same_kind(other)
        return self.root < other.root  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        self._require_same_kind(other)
        return self.root <= other.root  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        self._require_same_kind(other)
        return self.root > other.root  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        self._require_same_kind(other)
        return self.root >= other.root  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return str(self.root)  # type: ignore[attr-defined]


class _Identifier(_Wrapped, RootModel[HexObjectId]):
    model_config = ConfigDict(frozen=True)

    def as_bytes(self) -> bytes:
        """Return the 12 raw bytes of the object id."""
        return bytes.fromhex(self.root)


class _Text(_Wrapped, RootModel[StrictStr]):
    model_config = ConfigDict(frozen=True)


# Identifiers


class ArticleId(_Identifier):
    """Id of an article."""


class UserId(_Identifier):
    """Id of a user (article author, commenter, follower)."""


class TagId(_Identifier):
    """Id of a tag."""


class CommentId(_Identifier):
    """Id of an article comment or reply."""


# Article text


class ArticleTitle(_Text):
    pass


class SeoTitle(_Text):
    pass


class ArticleDescription(_Text):
    pass


class ArticleSlug(_Text):
    """URL slug of an article, used to look it up."""


# Tag text


class TagName(_Text):
    pass


class TagSlug(_Text):
    """URL slug of a tag, used to look it up."""


# User text


class UserName(_Text):
    """Unique user handle, used to look up a profile."""


class DisplayName(_Text):
    pass


class UserDescription(_Text):
    pass


class ShortDescription(_Text):
    pass


_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class MaybeUrl(RootModel[StrictStr]):
    """User-supplied link that may be malformed.

    Users can put anything into profile links, so the source string is always
    kept and parsed on access.

    Example:
        >>> link = MaybeUrl("t.me/someone")
        >>> link.url is None
        True
        >>> link.error is not None
        True
    """

    model_config = ConfigDict(frozen=True)

    @property
    def source(self) -> str:
        return self.root

    @property
    def url(self) -> AnyUrl | None:
        """Parsed URL, or None if the source is not a valid absolute URL."""
        try:
            return _URL_ADAPTER.validate_python(self.root)
        except pydantic.ValidationError:
            return None

    @property
    def error(self) -> str | None:
        """Parse error text, or None if the source is a valid URL."""
        try:
            _URL_ADAPTER.validate_python(self.root)
        except pydantic.ValidationError as exc:
            return exc.errors()[0]["msg"]
        return None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.root


__all__ = [
    "ArticleDescription",
    "ArticleId",
    "ArticleSlug",
    "ArticleTitle",
    "CommentId",
    "DisplayName",
    "HexObjectId",
    "MaybeUrl",
    "SeoTitle",
    "ShortDescription",
    "TagId",
    "TagName",
    "TagSlug",
    "UserDescription",
    "UserId",
    "UserName",
]
