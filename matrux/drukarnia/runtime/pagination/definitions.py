"""Pagination state and callable definitions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ...core.request import PageNumber
    from ...models.page import Page


class StreamState(str, Enum):
    """Lifecycle of a page stream.

    FETCHING is the only state in which a pull performs a network call.
    EXHAUSTED and FAILED are terminal.
    """

    FETCHING = "fetching"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not StreamState.FETCHING


# Fetches the page with the given number
PageFetcher = Callable[["PageNumber"], Awaitable["Page[Any]"]]
