"""Base classes and wire value types for schema models.

Architecture:
    Every response shape is a frozen pydantic model deriving from Record.
    Unknown keys are rejected (``extra="forbid"``) and each field is typed
    strictly on its own, so a number never passes for a string and a bool
    never passes for a count.

Design Decisions:
    - Strictness is per field (StrictStr, StrictBool, Count) rather than
      model-wide, so nested objects still validate from plain dicts
    - Timestamps, durations and the numeric ``isLiked`` flag use plain
      validators with their own error types, reported by the decoder
    - Each record remembers when it was decoded; ``age()`` tells how old
      the data is
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    PrivateAttr,
    StrictBool,
    StrictInt,
)
from pydantic_core import PydanticCustomError

# Non-negative JSON integer; booleans and floats are rejected
Count = Annotated[StrictInt, Field(ge=0)]


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_iso_datetime(value: Any) -> datetime:
    """Parse an ISO-8601 string into a timezone-aware datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            raise PydanticCustomError(
                "iso_datetime", "Input should be an ISO-8601 datetime string"
            ) from None
    else:
        raise PydanticCustomError("iso_datetime", "Input should be an ISO-8601 datetime string")
    if parsed.tzinfo is None:
        raise PydanticCustomError("iso_datetime", "Datetime must carry a timezone offset")
    return parsed


def parse_read_time(value: Any) -> timedelta:
    """Whole seconds to timedelta."""
    if isinstance(value, timedelta):
        return value
    if not _is_integer(value):
        raise PydanticCustomError("whole_seconds", "Input should be a whole number of seconds")
    return timedelta(seconds=value)


def parse_like_flag(value: Any) -> bool:
    # the server sends the viewer's like count here, not a bool
    if not _is_integer(value) or value < 0:
        raise PydanticCustomError("like_counter", "Input should be a non-negative integer")
    return value > 0


IsoDatetime = Annotated[datetime, PlainValidator(parse_iso_datetime)]
ReadTime = Annotated[timedelta, PlainValidator(parse_read_time)]
LikeFlag = Annotated[bool, PlainValidator(parse_like_flag)]


class WireModel(BaseModel):
    """Strict, immutable mirror of a JSON object."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=False)


class Record(WireModel):
    """Top-level schema model. Carries the time it was decoded at."""

    _fetched_at: datetime = PrivateAttr(default_factory=lambda: datetime.now(UTC))

    @property
    def fetched_at(self) -> datetime:
        return self._fetched_at

    def age(self) -> timedelta:
        """Time elapsed since this record was decoded.

        May be used to re-fetch an object once it gets too old.
        """
        return datetime.now(UTC) - self._fetched_at


class Relationships(WireModel):
    """The viewer's attitude to another object (user, tag, article)."""

    is_subscribed: StrictBool = Field(alias="isSubscribed")
    is_blocked: StrictBool = Field(alias="isBlocked")


__all__ = [
    "Count",
    "IsoDatetime",
    "LikeFlag",
    "ReadTime",
    "Record",
    "Relationships",
    "WireModel",
    "parse_iso_datetime",
    "parse_like_flag",
    "parse_read_time",
]
