"""Unit tests for Query and Page models."""

import pytest
from pydantic import ValidationError

from psaquery.models import Page, Query


class TestQuery:
    def test_strips_text(self):
        query = Query(text="  SELECT Name FROM pse__Proj__c  ")
        assert query.text == "SELECT Name FROM pse__Proj__c"
        assert str(query) == "SELECT Name FROM pse__Proj__c"

    def test_rejects_empty_text(self):
        with pytest.raises(ValidationError):
            Query(text="   ")

    def test_is_immutable(self):
        query = Query(text="SELECT Id FROM Account", label="accounts")
        with pytest.raises(ValidationError):
            query.text = "SELECT Name FROM Account"


class TestPage:
    def test_defaults_to_empty_final_page(self):
        page = Page()
        assert page.done is True
        assert page.cursor is None
        assert page.record_count == 0

    def test_record_count(self):
        page = Page(records=({"Id": "1"}, {"Id": "2"}), done=False, cursor="c1")
        assert page.record_count == 2

    def test_empty_page_is_truthy(self):
        assert Page(records=(), done=True)
