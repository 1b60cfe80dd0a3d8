"""Site connectors."""

from .drukarnia import DrukarniaRESTConnector

__all__ = ["DrukarniaRESTConnector"]
