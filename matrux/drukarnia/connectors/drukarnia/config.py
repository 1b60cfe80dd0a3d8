"""Shared Drukarnia connector constants.

This module centralizes the site URL and request defaults used by the REST
connector so the connector itself can stay small and focused. Every value
can be overridden per connector through keyword arguments.
"""

from __future__ import annotations

BASE_URL = "https://drukarnia.com.ua"

USER_AGENT = "matrux-drukarnia (+https://drukarnia.com.ua)"

# Seconds, total per request
DEFAULT_TIMEOUT = 30.0

# Replies are served under any article id; the server only looks at the comment
PLACEHOLDER_ARTICLE_ID = "000000000000000000000000"

# Status the server answers with when a lookup target does not exist
NOT_FOUND_STATUSES = frozenset({404})

# The replies endpoint reports a missing comment as unauthorized
REPLIES_NOT_FOUND_STATUSES = frozenset({401, 404})
