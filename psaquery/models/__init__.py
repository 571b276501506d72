"""Data models for queries and result pages.

Query is a frozen Pydantic v2 model so it is validated once at construction
and cannot change during a retrieval. Page is a plain frozen dataclass: it is
produced internally from already-parsed service responses and discarded as
soon as its records are accumulated.
"""

from .page import Page
from .query import Query

__all__ = [
    "Page",
    "Query",
]
