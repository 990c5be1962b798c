"""Querystring rendering — filter -> fields -> page -> sort."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence


def render_page(descriptor: Mapping[str, int]) -> str:
    """Render a page descriptor as ``page[k]=v`` segments, in descriptor order."""
    return "&".join(f"page[{key}]={value}" for key, value in descriptor.items())


def build_querystring(
    filter: Mapping[str, Sequence[str]],
    fields: Sequence[str],
    page: str,
    sort: Sequence[str],
) -> str:
    """Produce a canonical querystring (no leading ``?``, values emitted as stored).

    ``page`` is a pre-rendered fragment (see ``render_page``) inserted verbatim.
    Empty segments are left out entirely.
    """
    segments: list[str] = [
        f"filter[{name}]={_join(values)}" for name, values in filter.items()
    ]
    if fields:
        segments.append(f"fields={_join(fields)}")
    if page:
        segments.append(page)
    if sort:
        segments.append(f"sort={_join(sort)}")
    return "&".join(segments)


def _join(values: Iterable[str]) -> str:
    return ",".join(values)
