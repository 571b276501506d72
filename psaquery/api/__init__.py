"""High-level retrieval API and query builders."""

from .query_api import QueryAPI, retrieve
from .query_builder import (
    SOQLQueryBuilder,
    build_project_query,
    build_timecard_query,
    format_soql_date,
    soql_quote,
)

__all__ = [
    "QueryAPI",
    "retrieve",
    "SOQLQueryBuilder",
    "build_project_query",
    "build_timecard_query",
    "format_soql_date",
    "soql_quote",
]
