"""QueryStringCodec — bracketed querystring <-> Options.

Grammar::

    filter[<name>]=<v1>[,<v2>...]
    page[<name>]=<integer>
    sort=<f1>[,<f2>...]        (repeatable)
    fields=<f1>[,<f2>...]      (repeatable)

Decoding is tolerant: a bracket term without ``=value`` is dropped. Only
malformed percent-encoding, nested bracket terms and non-integer page values
raise.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote, unquote_plus

from .exceptions import (
    InvalidPageValueError,
    MalformedEncodingError,
    NestedHierarchyError,
)
from .options import Options
from .pagination import strategy_for

logger = logging.getLogger("cqrs_ddd.querystring.codec")

_BRACKET_RE = re.compile(r"(filter|page)\[", re.IGNORECASE)
_COMMA_RE = re.compile(r"\s?,\s?")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_INT_RE = re.compile(
    r"[+-]?(?:0[xX](?:_?[0-9a-fA-F])+|0[oO](?:_?[0-7])+|0[bB](?:_?[01])+"
    r"|[0-9]+(?:_[0-9]+)*)"
)
_RADIX_RE = re.compile(r"[+-]?0[xXoObB]")
# page values are 64-bit signed integers
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

FILTER = "filter"
PAGE = "page"
SORT = "sort"
FIELDS = "fields"


class QueryStringCodec:
    """Decode querystrings into ``Options`` and encode them back."""

    def __init__(
        self,
        *,
        plus_as_space: bool = False,
        infer_strategy: bool = True,
    ) -> None:
        """
        Initialize QueryStringCodec.

        Args:
            plus_as_space: Decode ``+`` as a space (form encoding). Off by
                default so ``sort=+field`` keeps its prefix.
            infer_strategy: Attach a pagination strategy based on the page
                keys present (``limit`` -> offset, ``size`` -> page/size).
        """
        self._plus_as_space = plus_as_space
        self._infer_strategy = infer_strategy

    def decode(self, qs: str) -> Options:
        """Parse ``qs`` (the part after ``?``) into ``Options``."""
        if not qs:
            return Options()

        decoded = self._unescape(qs)
        filters: dict[str, list[str]] = {}
        page: dict[str, int] = {}
        sort: list[str] = []
        fields: list[str] = []

        for segment in decoded.split("&"):
            if not segment:
                continue
            match = _BRACKET_RE.match(segment)
            if match is None:
                self._parse_top_level(segment, sort, fields)
                continue
            term = self._parse_bracket_term(segment, match.end())
            if term is None:
                logger.debug("Dropping bracket term without value: %r", segment)
                continue
            name, value = term
            if match.group(1).lower() == FILTER:
                filters[name] = _COMMA_RE.split(value)
            else:
                page[name] = self._parse_int(name, value)

        strategy = strategy_for(page) if self._infer_strategy else None
        if strategy is not None:
            logger.debug("Inferred %r from page keys %s", strategy, sorted(page))
        return Options(
            filter=filters,
            page=page,
            sort=sort,
            fields=fields,
            raw_querystring=decoded,
            pagination_strategy=strategy,
        )

    def encode(self, options: Options) -> str:
        """Canonical querystring for ``options`` at its current page."""
        return options.current()

    # -- Helpers ---------------------------------------------------------

    def _unescape(self, qs: str) -> str:
        bad = _BAD_PERCENT_RE.search(qs)
        if bad is not None:
            raise MalformedEncodingError(
                f"invalid percent-encoding at position {bad.start()}",
                segment=qs[bad.start() : bad.start() + 3],
            )
        unescape = unquote_plus if self._plus_as_space else unquote
        try:
            return unescape(qs, errors="strict")
        except UnicodeDecodeError as exc:
            raise MalformedEncodingError(
                f"percent-encoded bytes are not valid UTF-8: {exc.reason}"
            ) from exc

    def _parse_bracket_term(
        self, segment: str, start: int
    ) -> tuple[str, str] | None:
        """Return ``(name, value)`` or ``None`` when the term has no value."""
        close = segment.find("]", start)
        if close <= start:
            return None
        name = segment[start:close]
        remainder = segment[close + 1 :]
        if remainder.startswith("["):
            raise NestedHierarchyError(segment)
        if not remainder.startswith("="):
            return None
        return name, remainder[1:]

    def _parse_top_level(
        self, segment: str, sort: list[str], fields: list[str]
    ) -> None:
        key, sep, value = segment.partition("=")
        if not sep or not value:
            return
        if key == SORT:
            sort.extend(_COMMA_RE.split(value))
        elif key == FIELDS:
            fields.extend(_COMMA_RE.split(value))

    def _parse_int(self, name: str, value: str) -> int:
        if _INT_RE.fullmatch(value) is None:
            raise InvalidPageValueError(name, value)
        base = 0 if _RADIX_RE.match(value) else 10
        number = int(value, base)
        if not _INT64_MIN <= number <= _INT64_MAX:
            raise InvalidPageValueError(name, value)
        return number


_default_codec = QueryStringCodec()


def from_querystring(qs: str) -> Options:
    """Decode ``qs`` with the default codec."""
    return _default_codec.decode(qs)


def to_querystring(options: Options) -> str:
    """Encode ``options`` with the default codec."""
    return _default_codec.encode(options)
