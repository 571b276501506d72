"""Query service connectors."""

from .psa import PSARESTConnector

__all__ = ["PSARESTConnector"]
