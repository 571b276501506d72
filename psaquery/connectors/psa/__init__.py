"""PSA (Salesforce REST) connector implementation."""

from .provider import PSARESTConnector

__all__ = [
    "PSARESTConnector",
]
