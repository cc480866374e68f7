#!/usr/bin/env python3
"""
Unit tests for the DynamoDB helpers and the CSV export writer.

Run with: pytest tests/test_dynamodb_helper.py -v
"""

from decimal import Decimal

import pytest
from botocore.exceptions import ClientError

from config.db_config import ENROLLMENTS_TABLE, get_table
from helpers.csv_helper import ENROLLMENT_CSV_HEADERS, enrollment_row, iter_enrollments_csv
from helpers.dynamodb_helper import (
    from_dynamodb,
    get_item,
    is_condition_failure,
    matches_search,
    paginate,
    put_item,
    slugify,
    to_dynamodb,
    update_fields,
)


class TestConversion:

    def test_numbers_become_decimals(self):
        item = to_dynamodb({"price": 12.5, "count": 3, "flag": True, "tags": [1, "a"]})

        assert item == {"price": Decimal("12.5"), "count": Decimal("3"), "flag": True,
                        "tags": [Decimal("1"), "a"]}

    def test_decimals_become_plain_numbers(self):
        item = from_dynamodb({"price": Decimal("12.5"), "count": Decimal("3"), "nested": [Decimal("2")]})

        assert item == {"price": 12.5, "count": 3, "nested": [2]}
        assert isinstance(item["count"], int)


class TestPaginate:

    def test_middle_page(self):
        page, pagination = paginate(list(range(45)), 2, 20)

        assert page == list(range(20, 40))
        assert pagination == {"currentPage": 2, "totalPages": 3, "totalItems": 45, "itemsPerPage": 20}

    def test_past_the_end_is_empty(self):
        page, pagination = paginate([1, 2], 5, 20)

        assert page == []
        assert pagination["totalPages"] == 1

    def test_empty_collection(self):
        page, pagination = paginate([], 1, 20)

        assert page == []
        assert pagination["totalPages"] == 0


@pytest.mark.parametrize("title,slug", [
    ("My Post", "my-post"),
    ("  Saffron: The Red Gold!  ", "saffron-the-red-gold"),
    ("Saffron 1g", "saffron-1g"),
    ("R&D  Program", "rd-program"),
])
def test_slugify(title, slug):
    assert slugify(title) == slug


def test_slugify_never_returns_empty():
    assert slugify("!!!")


class TestSearch:

    def test_case_insensitive_substring(self):
        item = {"studentName": "Meera Shah", "email": "meera@example.com", "phone": "123"}

        assert matches_search(item, "SHAH", ["studentName", "email"])
        assert not matches_search(item, "ravi", ["studentName", "email"])

    def test_regex_characters_are_literal(self):
        item = {"studentName": "a.b"}

        assert matches_search(item, ".", ["studentName"])
        assert not matches_search(item, "a*", ["studentName"])

    def test_missing_fields_do_not_match(self):
        assert not matches_search({}, "x", ["studentName"])


class TestCsv:

    def test_row_formats_dates_and_admin_name(self):
        enrollment = {
            "studentName": "Ravi",
            "email": "ravi@example.com",
            "phone": "1",
            "status": "approved",
            "source": "manual",
            "enrolledBy": "admin-1",
            "createdAt": "2025-02-03T10:00:00+00:00",
            "approvedAt": "2025-02-04T10:00:00+00:00",
            "training": {"title": "Saffron Basics"},
        }

        row = dict(zip(ENROLLMENT_CSV_HEADERS, enrollment_row(enrollment, {"admin-1": "Site Admin"})))

        assert row["Training"] == "Saffron Basics"
        assert row["Enrolled By"] == "Site Admin"
        assert row["Created At"] == "2025-02-03"
        assert row["Approved At"] == "2025-02-04"
        assert row["Completed At"] == ""
        assert row["WhatsApp"] == ""

    def test_values_with_commas_are_quoted(self):
        lines = list(iter_enrollments_csv([{"studentName": "Kumar, Ravi", "notes": 'say "hi"'}]))

        assert lines[0] == ",".join(ENROLLMENT_CSV_HEADERS) + "\n"
        assert lines[1].startswith('"Kumar, Ravi",')
        assert '"say ""hi"""' in lines[1]

    def test_empty_export_is_just_the_header(self):
        assert len(list(iter_enrollments_csv([]))) == 1


class TestUpdateFields:

    def test_sets_attributes_and_returns_item(self, dynamodb):
        table = get_table(ENROLLMENTS_TABLE)
        put_item(table, {"enrollmentId": "e1", "status": "pending", "notes": None})

        item = update_fields(table, {"enrollmentId": "e1"}, {"status": "approved", "seats": 2})

        assert item == {"enrollmentId": "e1", "status": "approved", "notes": None, "seats": 2}

    def test_missing_item_is_not_created(self, dynamodb):
        table = get_table(ENROLLMENTS_TABLE)

        with pytest.raises(ClientError) as exc_info:
            update_fields(table, {"enrollmentId": "gone"}, {"status": "approved"})

        assert is_condition_failure(exc_info.value)
        assert get_item(table, {"enrollmentId": "gone"}) is None
