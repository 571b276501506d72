"""Runtime: retry policy, pagination engine and REST plumbing."""

from .retry import RetryAttempt, RetryPolicy

__all__ = [
    "RetryAttempt",
    "RetryPolicy",
]
