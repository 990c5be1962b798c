"""Tests for exceptions module."""

from __future__ import annotations

from cqrs_ddd_querystring.exceptions import (
    InvalidPageValueError,
    MalformedEncodingError,
    NestedHierarchyError,
    QueryStringError,
    QueryStringParseError,
)


def test_hierarchy() -> None:
    for cls in (MalformedEncodingError, NestedHierarchyError, InvalidPageValueError):
        assert issubclass(cls, QueryStringParseError)
        assert issubclass(cls, QueryStringError)


def test_base_to_dict() -> None:
    err = QueryStringError("boom")
    assert err.to_dict() == {"error": "QUERYSTRING_ERROR", "message": "boom"}


def test_nested_hierarchy_to_dict() -> None:
    d = NestedHierarchyError("page[a][b]=1").to_dict()
    assert d["error"] == "NESTED_HIERARCHY"
    assert d["segment"] == "page[a][b]=1"
    assert "cannot parse nested object hierarchy" in d["message"]


def test_invalid_page_value_to_dict() -> None:
    d = InvalidPageValueError("limit", "abc").to_dict()
    assert d == {
        "error": "INVALID_PAGE_VALUE",
        "message": "page[limit] must be an integer, got 'abc'",
        "segment": "page[limit]=abc",
        "key": "limit",
        "value": "abc",
    }
