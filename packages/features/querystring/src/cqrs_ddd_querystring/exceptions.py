"""
Querystring exception hierarchy.

All exceptions inherit from ``QueryStringError`` and provide ``to_dict()``
for API-friendly error responses. Only the three decode failures below are
ever raised by the codec; every other malformed input degrades to a
best-effort ``Options`` value.
"""

from __future__ import annotations

from typing import Any


class QueryStringError(Exception):
    """Base exception for all querystring errors."""

    code = "QUERYSTRING_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
        }


class QueryStringParseError(QueryStringError):
    """A querystring could not be decoded into ``Options``."""

    code = "QUERYSTRING_PARSE_ERROR"

    def __init__(self, message: str, segment: str | None = None) -> None:
        self.message = message
        self.segment = segment
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "segment": self.segment,
        }


class MalformedEncodingError(QueryStringParseError):
    """Percent-decoding of the raw querystring failed."""

    code = "MALFORMED_ENCODING"


class NestedHierarchyError(QueryStringParseError):
    """A bracket term nests deeper than the flat ``type[name]`` grammar."""

    code = "NESTED_HIERARCHY"

    def __init__(self, segment: str) -> None:
        super().__init__(
            f"cannot parse nested object hierarchy: {segment!r}",
            segment=segment,
        )


class InvalidPageValueError(QueryStringParseError, ValueError):
    """A ``page[name]`` value is not an integer."""

    code = "INVALID_PAGE_VALUE"

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"page[{key}] must be an integer, got {value!r}",
            segment=f"page[{key}]={value}",
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["key"] = self.key
        result["value"] = self.value
        return result
