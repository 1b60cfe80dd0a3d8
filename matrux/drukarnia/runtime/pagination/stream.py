"""Page stream and item flattener.

Architecture:
    PageStream walks a paginated collection one page per pull. It owns a
    single cursor and a state (FETCHING, EXHAUSTED, FAILED); nothing is
    shared between streams. ItemStream sits on top of a PageStream and yields
    the items one by one, pulling the next page only when its buffer is
    empty.

Design Decisions:
    - No look-ahead: the next page is fetched only when the consumer asks
    - An empty page ends the stream cleanly; ``has_more=False`` ends it
      right after the page that carries it
    - The first error fails the stream: it is raised on that pull, the cursor
      stays on the failed page and later pulls end iteration without a call
    - A pull while another one is awaiting the fetcher raises RuntimeError
    - Streams are not restartable; build a new one to start over
"""

from __future__ import annotations

from collections import deque
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from ...core.request import FIRST_PAGE, PageNumber
from ...models.page import Page
from .definitions import StreamState
from .telemetry import log_page_fetched, log_stream_exhausted, log_stream_failed

T = TypeVar("T")


class PageStream(Generic[T]):
    """Async iterator over the pages of a paginated collection.

    Example:
        >>> async for page in client.feed():
        ...     print(page.number, len(page))
    """

    def __init__(
        self,
        fetch: Callable[[PageNumber], Awaitable[Page[T]]],
        *,
        start_page: PageNumber | int = FIRST_PAGE,
        label: str = "pages",
    ) -> None:
        """Initialize the stream.

        Args:
            fetch: Coroutine function fetching the page with the given number
            start_page: First page to fetch
            label: Name used in log records
        """
        self._fetch = fetch
        self._cursor = PageNumber.of(start_page)
        self._state = StreamState.FETCHING
        self._in_flight = False
        self._pages_yielded = 0
        self.label = label

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def cursor(self) -> PageNumber:
        """Page number the next pull will fetch (or the one that failed)."""
        return self._cursor

    @property
    def pages_yielded(self) -> int:
        return self._pages_yielded

    def __aiter__(self) -> PageStream[T]:
        return self

    async def __anext__(self) -> Page[T]:
        if self._state.is_terminal:
            raise StopAsyncIteration
        if self._in_flight:
            raise RuntimeError(f"{self.label}: a page fetch is already in progress")

        self._in_flight = True
        try:
            page = await self._fetch(self._cursor)
        except Exception as exc:
            self._state = StreamState.FAILED
            log_stream_failed(
                label=self.label,
                page=int(self._cursor),
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise
        finally:
            self._in_flight = False

        log_page_fetched(label=self.label, page=int(self._cursor), items=len(page))
        if page.is_empty:
            self._finish()
            raise StopAsyncIteration

        self._pages_yielded += 1
        if page.has_more is False:
            self._finish()
        else:
            self._cursor = self._cursor.next()
        return page

    def _finish(self) -> None:
        self._state = StreamState.EXHAUSTED
        log_stream_exhausted(
            label=self.label,
            pages_yielded=self._pages_yielded,
            last_cursor=int(self._cursor),
        )

    def flatten(self) -> ItemStream[T]:
        """Iterate over individual items instead of pages."""
        return ItemStream(self)

    async def collect(self) -> list[Page[T]]:
        """Drain the stream into a list of pages."""
        return [page async for page in self]


class ItemStream(Generic[T]):
    """Async iterator over the items of a PageStream, in page order."""

    def __init__(self, pages: PageStream[T]) -> None:
        self._pages = pages
        self._buffer: deque[T] = deque()

    @property
    def pages(self) -> PageStream[T]:
        return self._pages

    def __aiter__(self) -> ItemStream[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            # StopAsyncIteration and fetch errors propagate from here
            page = await anext(self._pages)
            self._buffer.extend(page.items)
        return self._buffer.popleft()

    async def collect(self, limit: int | None = None) -> list[T]:
        """Drain up to ``limit`` items (all items if None) into a list.

        Pages beyond the one holding the last requested item are not fetched.
        """
        items: list[T] = []
        if limit is not None and limit <= 0:
            return items
        async for item in self:
            items.append(item)
            if limit is not None and len(items) >= limit:
                break
        return items
