"""Custom exception hierarchy."""

from __future__ import annotations


class PSAQueryError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(PSAQueryError):
    """A single call to the query service failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransientCallFailure(ProviderError):
    """Call failed for a reason that may clear up on retry.

    Covers connection errors, timeouts and 5xx responses.
    """

    pass


class RateLimitError(TransientCallFailure):
    """Query service rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class PermanentCallFailure(ProviderError):
    """Call was rejected and repeating it will not help (e.g. malformed SOQL)."""

    pass


class RetrievalError(PSAQueryError):
    """Terminal failure of a whole retrieval.

    Attributes:
        pages_completed: Pages successfully retrieved before the failure
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.pages_completed = 0


class MalformedPage(RetrievalError):
    """Page reported more results but carried no continuation token."""

    def __init__(self, message: str, page_index: int) -> None:
        super().__init__(message)
        self.page_index = page_index


class RetrievalExhausted(RetrievalError):
    """Every allowed attempt for a single call failed."""

    def __init__(self, message: str, attempts: int, last_error: BaseException) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class RetrievalAborted(RetrievalError):
    """A call failed with an error classified as not worth retrying."""

    def __init__(self, message: str, attempts: int, last_error: BaseException) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class TooManyPages(RetrievalError):
    """Service kept reporting more pages past the configured cap."""

    def __init__(self, message: str, max_pages: int) -> None:
        super().__init__(message)
        self.max_pages = max_pages


class RetrievalCancelled(RetrievalError):
    """Retrieval stopped by a cancel signal or deadline before completion."""

    pass


class ValidationError(PSAQueryError):
    """Query input validation failure."""

    pass
