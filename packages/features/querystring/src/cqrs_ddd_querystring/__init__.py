"""Bracketed querystring options — filter, page, sort, fields; pagination links."""

from __future__ import annotations

from .codec import QueryStringCodec, from_querystring, to_querystring
from .exceptions import (
    InvalidPageValueError,
    MalformedEncodingError,
    NestedHierarchyError,
    QueryStringError,
    QueryStringParseError,
)
from .operators import FilterClause, FilterOperator, group_filters, parse_filter_value
from .options import Options
from .pagination import (
    OffsetStrategy,
    PageSizeStrategy,
    PaginationStrategy,
    strategy_for,
)
from .querystring import build_querystring, render_page

__all__ = [
    "FilterClause",
    "FilterOperator",
    "InvalidPageValueError",
    "MalformedEncodingError",
    "NestedHierarchyError",
    "OffsetStrategy",
    "Options",
    "PageSizeStrategy",
    "PaginationStrategy",
    "QueryStringCodec",
    "QueryStringError",
    "QueryStringParseError",
    "build_querystring",
    "from_querystring",
    "group_filters",
    "parse_filter_value",
    "render_page",
    "strategy_for",
    "to_querystring",
]
