"""Pagination strategies — compute first/prev/next/last page descriptors.

A page descriptor is the small ``{key: int}`` mapping decoded from
``page[...]`` parameters. Strategies are stateless: every method is a pure
function of the descriptor (and, for ``last``, the total item count). An
empty result means the strategy does not apply because its sizing key is
missing.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

logger = logging.getLogger("cqrs_ddd.querystring.pagination")

PageDescriptor = dict[str, int]


class PaginationStrategy(ABC):
    """Base for pagination numbering schemes."""

    #: Key whose absence makes the strategy inapplicable.
    size_key: str
    #: Key holding the current position.
    position_key: str

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def _size(self, page: Mapping[str, int]) -> int | None:
        return page.get(self.size_key)

    def _position(self, page: Mapping[str, int]) -> int:
        return page.get(self.position_key, 0)

    def _descriptor(self, size: int, position: int) -> PageDescriptor:
        return {self.size_key: size, self.position_key: max(0, position)}

    def current(self, page: Mapping[str, int]) -> PageDescriptor:
        """Descriptor for the page ``page`` already points at."""
        size = self._size(page)
        if size is None:
            return {}
        return self._descriptor(size, self._position(page))

    def first(self, page: Mapping[str, int]) -> PageDescriptor:
        size = self._size(page)
        if size is None:
            return {}
        return self._descriptor(size, 0)

    @abstractmethod
    def next(self, page: Mapping[str, int]) -> PageDescriptor: ...

    @abstractmethod
    def prev(self, page: Mapping[str, int]) -> PageDescriptor: ...

    @abstractmethod
    def last(self, page: Mapping[str, int], total: int) -> PageDescriptor: ...


class OffsetStrategy(PaginationStrategy):
    """``page[limit]`` / ``page[offset]`` pagination."""

    size_key = "limit"
    position_key = "offset"

    def next(self, page: Mapping[str, int]) -> PageDescriptor:
        limit = self._size(page)
        if limit is None:
            return {}
        return self._descriptor(limit, self._position(page) + limit)

    def prev(self, page: Mapping[str, int]) -> PageDescriptor:
        limit = self._size(page)
        if limit is None:
            return {}
        return self._descriptor(limit, self._position(page) - limit)

    def last(self, page: Mapping[str, int], total: int) -> PageDescriptor:
        """Offset of the start of the final page: ``total // limit * limit``."""
        limit = self._size(page)
        if limit is None:
            return {}
        if limit <= 0:
            logger.debug("Cannot compute last page with limit=%s", limit)
            return {}
        return self._descriptor(limit, total // limit * limit)


class PageSizeStrategy(PaginationStrategy):
    """``page[size]`` / ``page[page]`` pagination (zero-based page numbers)."""

    size_key = "size"
    position_key = "page"

    def next(self, page: Mapping[str, int]) -> PageDescriptor:
        size = self._size(page)
        if size is None:
            return {}
        return self._descriptor(size, self._position(page) + 1)

    def prev(self, page: Mapping[str, int]) -> PageDescriptor:
        size = self._size(page)
        if size is None:
            return {}
        return self._descriptor(size, self._position(page) - 1)

    def last(self, page: Mapping[str, int], total: int) -> PageDescriptor:
        size = self._size(page)
        if size is None:
            return {}
        if size <= 0:
            logger.debug("Cannot compute last page with size=%s", size)
            return {}
        return self._descriptor(size, total // size)


def strategy_for(page: Mapping[str, int]) -> PaginationStrategy | None:
    """Infer the strategy from the sizing key present; ``size`` wins over ``limit``."""
    strategy: PaginationStrategy | None = None
    if OffsetStrategy.size_key in page:
        strategy = OffsetStrategy()
    if PageSizeStrategy.size_key in page:
        strategy = PageSizeStrategy()
    return strategy
