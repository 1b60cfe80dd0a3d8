"""Drukarnia REST connector and endpoint registry."""

from .endpoints import get_endpoint_adapter, get_endpoint_spec
from .provider import DrukarniaRESTConnector

__all__ = [
    "DrukarniaRESTConnector",
    "get_endpoint_adapter",
    "get_endpoint_spec",
]
