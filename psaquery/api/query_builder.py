"""Query builder for fluent SOQL Query construction.

This module provides a fluent API for constructing Query instances plus the
two canned record queries (timecards and projects for an opportunity).

Design Decisions:
    - Fluent API: Method chaining keeps multi-clause queries readable
    - Immutable result: build() returns a frozen Query
    - Literals are escaped with soql_quote(); user input never reaches the
      query text unquoted
"""

from __future__ import annotations

from datetime import date, datetime

from ..connectors.psa.constants import (
    MAX_DATE_RANGE_DAYS,
    OPPORTUNITY_NUMBER_MAX_LENGTH,
    PROJECT_API_NAME,
    PROJECT_FIELDS,
    TIMECARD_API_NAME,
    TIMECARD_FIELDS,
    TIMECARD_FILTER,
    TIMECARD_ORDER_BY,
)
from ..core.exceptions import ValidationError
from ..models import Query

__all__ = [
    "SOQLQueryBuilder",
    "build_project_query",
    "build_timecard_query",
    "format_soql_date",
    "soql_quote",
    "validate_date_range",
    "validate_opportunity_number",
]


def soql_quote(value: str) -> str:
    """Quote a string literal for SOQL, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_soql_date(value: date | datetime) -> str:
    """Format a date as a SOQL date literal (YYYY-MM-DD).

    Examples:
        >>> format_soql_date(date(2024, 3, 5))
        '2024-03-05'
    """
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        raise ValidationError(f"Expected a date, got {type(value).__name__}")
    return value.isoformat()


def validate_opportunity_number(value: str | None) -> str:
    """Check an opportunity number and return it stripped."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError("Opportunity number is required")
    if len(cleaned) > OPPORTUNITY_NUMBER_MAX_LENGTH:
        raise ValidationError(
            f"Opportunity number must be at most {OPPORTUNITY_NUMBER_MAX_LENGTH} characters"
        )
    return cleaned


def validate_date_range(start_date: date | datetime, end_date: date | datetime) -> None:
    """Check that a reporting date range is ordered and not too long."""
    start = start_date.date() if isinstance(start_date, datetime) else start_date
    end = end_date.date() if isinstance(end_date, datetime) else end_date
    if start > end:
        raise ValidationError("Start date must not be after end date")
    if (end - start).days > MAX_DATE_RANGE_DAYS:
        raise ValidationError(f"Date range is too large (maximum {MAX_DATE_RANGE_DAYS} days)")


class SOQLQueryBuilder:
    """Fluent builder for SOQL queries.

    Example:
        >>> query = (SOQLQueryBuilder()
        ...     .select("Name", "pse__Stage__c")
        ...     .from_("pse__Proj__c")
        ...     .where("pse__Stage__c = 'Active'")
        ...     .order_by("Name")
        ...     .build())
        >>> query.text
        "SELECT Name,pse__Stage__c FROM pse__Proj__c WHERE pse__Stage__c = 'Active' ORDER BY Name"
    """

    def __init__(self) -> None:
        self._fields: list[str] = []
        self._object: str | None = None
        self._conditions: list[str] = []
        self._order_by: str | None = None
        self._limit: int | None = None
        self._label: str | None = None

    def select(self, *fields: str) -> SOQLQueryBuilder:
        self._fields.extend(fields)
        return self

    def from_(self, object_name: str) -> SOQLQueryBuilder:
        self._object = object_name
        return self

    def where(self, *conditions: str) -> SOQLQueryBuilder:
        """Add conditions; all conditions are joined with AND."""
        self._conditions.extend(conditions)
        return self

    def order_by(self, field: str) -> SOQLQueryBuilder:
        self._order_by = field
        return self

    def limit(self, limit: int) -> SOQLQueryBuilder:
        if limit < 1:
            raise ValidationError("limit must be positive")
        self._limit = limit
        return self

    def label(self, label: str) -> SOQLQueryBuilder:
        self._label = label
        return self

    def build(self) -> Query:
        """Build the query.

        Raises:
            ValidationError: If no fields or no object were given
        """
        if not self._fields:
            raise ValidationError("SOQL query needs at least one field")
        if not self._object:
            raise ValidationError("SOQL query needs an object to select from")

        parts = [f"SELECT {','.join(self._fields)}", f"FROM {self._object}"]
        if self._conditions:
            parts.append("WHERE " + " AND ".join(self._conditions))
        if self._order_by:
            parts.append(f"ORDER BY {self._order_by}")
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        return Query(text=" ".join(parts), label=self._label)


def build_timecard_query(
    opportunity_number: str,
    start_date: date | datetime,
    end_date: date | datetime,
) -> Query:
    """Build the timecard query for an opportunity and date range.

    Rejected, zero-hour and non-billable timecards are excluded; results are
    ordered by timecard start date.

    Raises:
        ValidationError: If the opportunity number or date range is invalid
    """
    opportunity = validate_opportunity_number(opportunity_number)
    validate_date_range(start_date, end_date)
    return (
        SOQLQueryBuilder()
        .select(*TIMECARD_FIELDS)
        .from_(TIMECARD_API_NAME)
        .where(*TIMECARD_FILTER)
        .where(
            "pse__Project__r.pse__Opportunity__r.OpportunityNumber__c = " + soql_quote(opportunity),
            f"pse__Start_Date__c >= {format_soql_date(start_date)}",
            f"pse__Start_Date__c <= {format_soql_date(end_date)}",
        )
        .order_by(TIMECARD_ORDER_BY)
        .label(f"timecards:{opportunity}")
        .build()
    )


def build_project_query(opportunity_number: str) -> Query:
    """Build the project query for an opportunity.

    Raises:
        ValidationError: If the opportunity number is invalid
    """
    opportunity = validate_opportunity_number(opportunity_number)
    return (
        SOQLQueryBuilder()
        .select(*PROJECT_FIELDS)
        .from_(PROJECT_API_NAME)
        .where("pse__Opportunity__r.OpportunityNumber__c = " + soql_quote(opportunity))
        .label(f"projects:{opportunity}")
        .build()
    )
