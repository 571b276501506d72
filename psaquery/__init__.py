"""PSA Query - resilient paginated record retrieval for the PSA REST query service."""

from .api import (
    QueryAPI,
    SOQLQueryBuilder,
    build_project_query,
    build_timecard_query,
    retrieve,
)
from .connectors import PSARESTConnector
from .core import (
    DEFAULT_MAX_PAGES,
    EXPORT_RETRY,
    QUERY_RETRY,
    MalformedPage,
    PermanentCallFailure,
    ProviderError,
    PSAQueryError,
    RateLimitError,
    RetrievalAborted,
    RetrievalCancelled,
    RetrievalError,
    RetrievalExhausted,
    RetryConfig,
    TooManyPages,
    TransientCallFailure,
    ValidationError,
)
from .models import Page, Query
from .runtime import RetryPolicy
from .runtime.pagination import (
    PageFetcher,
    PageHint,
    PaginationLoop,
    QueryService,
    ResultAccumulator,
    RetrievalResult,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "retrieve",
    "QueryAPI",
    "SOQLQueryBuilder",
    "build_timecard_query",
    "build_project_query",
    # Connectors
    "PSARESTConnector",
    # Config
    "RetryConfig",
    "QUERY_RETRY",
    "EXPORT_RETRY",
    "DEFAULT_MAX_PAGES",
    # Models
    "Query",
    "Page",
    # Runtime
    "RetryPolicy",
    "PageFetcher",
    "PageHint",
    "PaginationLoop",
    "QueryService",
    "ResultAccumulator",
    "RetrievalResult",
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
