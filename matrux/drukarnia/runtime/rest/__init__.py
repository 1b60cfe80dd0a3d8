"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import ResponseParts, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "ResponseParts",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
