"""Structured logging for page streams.

This module provides telemetry hooks for pagination, emitting structured
logs for every fetched page and for the end of each stream.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(*, label: str, page: int, items: int) -> None:
    """Log a page returned by the fetcher.

    Args:
        label: Stream label (usually the endpoint id)
        page: Page number that was fetched
        items: Number of items on the page
    """
    logger.debug(
        "page_fetched",
        extra={"label": label, "page": page, "items": items},
    )


def log_stream_exhausted(*, label: str, pages_yielded: int, last_cursor: int) -> None:
    """Log the clean end of a stream.

    Args:
        label: Stream label
        pages_yielded: Number of non-empty pages handed to the consumer
        last_cursor: Page number of the last fetch
    """
    logger.info(
        "stream_exhausted",
        extra={"label": label, "pages_yielded": pages_yielded, "last_cursor": last_cursor},
    )


def log_stream_failed(
    *,
    label: str,
    page: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a stream that stopped on an error.

    Args:
        label: Stream label
        page: Page number whose fetch failed
        error_type: Exception class name (e.g., "HttpError", "DeserializationError")
        error_message: Exception message
    """
    logger.error(
        "stream_failed",
        extra={
            "label": label,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
