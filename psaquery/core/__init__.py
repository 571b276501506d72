"""Core configuration and exception types."""

from .config import DEFAULT_MAX_PAGES, EXPORT_RETRY, QUERY_RETRY, RetryConfig, is_retryable
from .exceptions import (
    MalformedPage,
    PermanentCallFailure,
    ProviderError,
    PSAQueryError,
    RateLimitError,
    RetrievalAborted,
    RetrievalCancelled,
    RetrievalError,
    RetrievalExhausted,
    TooManyPages,
    TransientCallFailure,
    ValidationError,
)

__all__ = [
    # Config
    "RetryConfig",
    "QUERY_RETRY",
    "EXPORT_RETRY",
    "DEFAULT_MAX_PAGES",
    "is_retryable",
    # Exceptions
    "PSAQueryError",
    "ProviderError",
    "TransientCallFailure",
    "RateLimitError",
    "PermanentCallFailure",
    "RetrievalError",
    "MalformedPage",
    "RetrievalExhausted",
    "RetrievalAborted",
    "TooManyPages",
    "RetrievalCancelled",
    "ValidationError",
]
