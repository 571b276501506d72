"""REST runtime: transport, endpoint specs and runner."""

from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "RESTTransport",
    "RestEndpointSpec",
    "ResponseAdapter",
    "RestRunner",
]
