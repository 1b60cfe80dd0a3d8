"""Pagination runtime: page streams and item flattening."""

from .definitions import PageFetcher, StreamState
from .stream import ItemStream, PageStream

__all__ = [
    "ItemStream",
    "PageFetcher",
    "PageStream",
    "StreamState",
]
