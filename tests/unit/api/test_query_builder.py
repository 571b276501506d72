"""Unit tests for the SOQL query builder and canned record queries."""

from datetime import date, datetime

import pytest

from psaquery.api import (
    SOQLQueryBuilder,
    build_project_query,
    build_timecard_query,
    soql_quote,
)
from psaquery.api.query_builder import (
    format_soql_date,
    validate_date_range,
    validate_opportunity_number,
)
from psaquery.core import ValidationError


class TestSOQLQueryBuilder:
    """Test fluent SOQL construction."""

    def test_full_query(self):
        query = (
            SOQLQueryBuilder()
            .select("Id", "Name")
            .from_("pse__Proj__c")
            .where("pse__Stage__c = 'Active'", "Name != null")
            .order_by("Name")
            .limit(10)
            .label("active-projects")
            .build()
        )
        assert query.text == (
            "SELECT Id,Name FROM pse__Proj__c "
            "WHERE pse__Stage__c = 'Active' AND Name != null ORDER BY Name LIMIT 10"
        )
        assert query.label == "active-projects"

    def test_minimal_query(self):
        query = SOQLQueryBuilder().select("Id").from_("Account").build()
        assert query.text == "SELECT Id FROM Account"
        assert query.label is None

    def test_requires_fields(self):
        with pytest.raises(ValidationError, match="field"):
            SOQLQueryBuilder().from_("Account").build()

    def test_requires_object(self):
        with pytest.raises(ValidationError, match="object"):
            SOQLQueryBuilder().select("Id").build()

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValidationError):
            SOQLQueryBuilder().limit(0)


class TestLiterals:
    """Test literal quoting and formatting."""

    def test_soql_quote_escapes(self):
        assert soql_quote("OP-1") == "'OP-1'"
        assert soql_quote("O'Brien") == "'O\\'Brien'"
        assert soql_quote("a\\b") == "'a\\\\b'"

    def test_format_soql_date(self):
        assert format_soql_date(date(2024, 3, 5)) == "2024-03-05"
        assert format_soql_date(datetime(2024, 3, 5, 17, 30)) == "2024-03-05"

    def test_format_soql_date_rejects_strings(self):
        with pytest.raises(ValidationError):
            format_soql_date("2024-03-05")  # type: ignore[arg-type]


class TestValidation:
    """Test input validation for canned queries."""

    def test_opportunity_number_is_stripped(self):
        assert validate_opportunity_number("  OP-1234 ") == "OP-1234"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_opportunity_number_required(self, value):
        with pytest.raises(ValidationError, match="required"):
            validate_opportunity_number(value)

    def test_opportunity_number_max_length(self):
        validate_opportunity_number("X" * 50)
        with pytest.raises(ValidationError, match="50"):
            validate_opportunity_number("X" * 51)

    def test_date_range_order(self):
        with pytest.raises(ValidationError, match="after"):
            validate_date_range(date(2024, 2, 1), date(2024, 1, 1))

    def test_date_range_limit(self):
        validate_date_range(date(2024, 1, 1), date(2024, 12, 31))
        with pytest.raises(ValidationError, match="365"):
            validate_date_range(date(2024, 1, 1), date(2025, 1, 2))

    def test_same_day_range(self):
        validate_date_range(date(2024, 1, 1), date(2024, 1, 1))


class TestCannedQueries:
    """Test the timecard and project queries."""

    def test_timecard_query(self):
        query = build_timecard_query("OP-1234", date(2024, 1, 1), date(2024, 3, 31))

        assert query.label == "timecards:OP-1234"
        assert query.text.startswith("SELECT pse__Project__r.pse__Opportunity__r.")
        assert " FROM pse__Timecard__c WHERE " in query.text
        assert "pse__Status__c NOT IN ('Rejected')" in query.text
        assert "(NOT pse__Milestone__r.Name LIKE 'NB%')" in query.text
        assert "OpportunityNumber__c = 'OP-1234'" in query.text
        assert "pse__Start_Date__c >= 2024-01-01" in query.text
        assert "pse__Start_Date__c <= 2024-03-31" in query.text
        assert query.text.endswith("ORDER BY pse__Start_Date__c")

    def test_timecard_query_validates(self):
        with pytest.raises(ValidationError):
            build_timecard_query("", date(2024, 1, 1), date(2024, 1, 2))
        with pytest.raises(ValidationError):
            build_timecard_query("OP-1", date(2024, 1, 2), date(2024, 1, 1))

    def test_project_query(self):
        query = build_project_query("OP-9")

        assert query.label == "projects:OP-9"
        assert " FROM pse__Proj__c WHERE " in query.text
        assert query.text.endswith("pse__Opportunity__r.OpportunityNumber__c = 'OP-9'")

    def test_quotes_in_opportunity_number_are_escaped(self):
        query = build_project_query("OP'1")
        assert "= 'OP\\'1'" in query.text
