"""Drukarnia connector.

Public surface:
    - DrukarniaRESTConnector: the read-only REST client
    - config: site URL and request defaults
"""

from .config import BASE_URL, DEFAULT_TIMEOUT, PLACEHOLDER_ARTICLE_ID, USER_AGENT
from .rest import DrukarniaRESTConnector

__all__ = [
    "BASE_URL",
    "DEFAULT_TIMEOUT",
    "PLACEHOLDER_ARTICLE_ID",
    "USER_AGENT",
    "DrukarniaRESTConnector",
]
