"""Runtime components: REST request path and pagination."""

from .pagination import ItemStream, PageStream, StreamState
from .rest import (
    HTTPClient,
    ResponseAdapter,
    ResponseParts,
    RestEndpointSpec,
    RestRunner,
    RESTTransport,
)

__all__ = [
    "HTTPClient",
    "ItemStream",
    "PageStream",
    "RESTTransport",
    "ResponseAdapter",
    "ResponseParts",
    "RestEndpointSpec",
    "RestRunner",
    "StreamState",
]
