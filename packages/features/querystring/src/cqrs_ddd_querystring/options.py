"""
Options — filter, page, sort and projection parsed from a querystring.

``Options`` is the value the codec decodes into and encodes from. It is
immutable; the pagination strategy is injected through
``with_pagination_strategy`` which returns a copy, so a decoded value can be
shared freely between callers.

Link helpers (``first``/``prev``/``next``/``last``/``current``) delegate the
page arithmetic to the attached ``PaginationStrategy`` and re-encode the
result together with the filters, projection and sort order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .pagination import PageDescriptor, PaginationStrategy
from .querystring import build_querystring, render_page

# Longest first so ``<=`` is not stripped as ``<``.
SORT_PREFIXES: tuple[str, ...] = ("<=", ">=", "!=", "-", "+", "<", ">")


def strip_prefix(value: str) -> str:
    """Remove a single leading direction/comparison prefix."""
    for prefix in SORT_PREFIXES:
        if value.startswith(prefix):
            return value[len(prefix) :]
    return value


def _contains(values: list[str], name: str) -> bool:
    if not name:
        return False
    return any(strip_prefix(value) == name for value in values)


class Options(BaseModel):
    """
    Immutable container for querystring options.

    Attributes:
        filter: Field name -> values (``filter[a]=x,y`` -> ``{"a": ["x", "y"]}``).
        page: Pagination key -> integer (``page[limit]=10``).
        sort: Sort fields, prefixes such as ``-`` preserved verbatim.
        fields: Projection; empty means all fields.
        raw_querystring: The URL-decoded querystring this value came from.
        pagination_strategy: Strategy used by the link helpers, if any.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    filter: dict[str, list[str]] = Field(default_factory=dict)
    page: dict[str, int] = Field(default_factory=dict)
    sort: list[str] = Field(default_factory=list)
    fields: list[str] = Field(default_factory=list)
    raw_querystring: str = Field(default="", exclude=True)
    pagination_strategy: PaginationStrategy | None = Field(
        default=None, exclude=True
    )

    def with_pagination_strategy(
        self, strategy: PaginationStrategy | None
    ) -> Options:
        """Return a copy with the pagination strategy replaced."""
        return self.model_copy(
            update={"pagination_strategy": strategy}, deep=True
        )

    # -- Links -----------------------------------------------------------

    def first(self) -> str:
        """Querystring for the first page."""
        strategy = self._active_strategy()
        if strategy is None:
            return self._link("")
        return self._link_for(strategy.first(self.page))

    def prev(self) -> str:
        """Querystring for the previous page (never before the first)."""
        strategy = self._active_strategy()
        if strategy is None:
            return self._link("")
        return self._link_for(strategy.prev(self.page))

    def next(self) -> str:
        """Querystring for the next page (no upper bound is enforced)."""
        strategy = self._active_strategy()
        if strategy is None:
            return self._link("")
        return self._link_for(strategy.next(self.page))

    def last(self, total: int) -> str:
        """Querystring for the last page given ``total`` items."""
        strategy = self._active_strategy()
        if strategy is None:
            return self._link("")
        return self._link_for(strategy.last(self.page, total))

    def current(self) -> str:
        """Querystring for the current page.

        Without a strategy the decoded page parameters are emitted unchanged.
        """
        if self.pagination_strategy is None:
            return self._link(render_page(self.page))
        return self._link_for(self.pagination_strategy.current(self.page))

    def __str__(self) -> str:
        return self.current()

    def _active_strategy(self) -> PaginationStrategy | None:
        if not self.page:
            return None
        return self.pagination_strategy

    def _link_for(self, descriptor: PageDescriptor) -> str:
        return self._link(render_page(descriptor))

    def _link(self, page_fragment: str) -> str:
        return build_querystring(self.filter, self.fields, page_fragment, self.sort)

    # -- Membership ------------------------------------------------------

    def contains_filter_field(self, name: str) -> bool:
        """True if ``filter[name]`` was supplied."""
        return bool(name) and name in self.filter

    def contains_sort_field(self, name: str) -> bool:
        """True if ``name`` is sorted on, ignoring any direction/comparison prefix."""
        return _contains(self.sort, name)

    def contains_projected_field(self, name: str) -> bool:
        """True if ``name`` is in the ``fields`` projection (prefix ignored)."""
        return _contains(self.fields, name)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        return self.model_dump()
