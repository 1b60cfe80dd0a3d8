"""One page of a paginated collection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from ..core.request import PageNumber

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Items of one page, in server order.

    Attributes:
        number: Page number this page was fetched with
        items: Decoded items
        total: Total item count, when the server reports it
        has_more: Whether further pages exist, when the server reports it
    """

    number: PageNumber
    items: tuple[T, ...]
    total: int | None = None
    has_more: bool | None = None

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
