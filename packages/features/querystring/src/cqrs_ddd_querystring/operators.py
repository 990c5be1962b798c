"""Filter operators expressed by literal prefix/suffix characters.

``filter[age]=>=18`` reads as ``age >= 18`` and ``filter[name]=*smith`` as
"name ends with smith". No semantic validation happens here; the value is
only split into operator and operand.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .options import Options


class FilterOperator(str, Enum):
    EXACT = "exact"
    NOT_EQUAL = "not_equal"
    GREATER_THAN = "greater_than"
    GREATER_THAN_EQUAL = "greater_than_equal"
    LESS_THAN = "less_than"
    LESS_THAN_EQUAL = "less_than_equal"
    BEGINS_WITH = "begins_with"
    ENDS_WITH = "ends_with"
    CONTAINS = "contains"


# Longest first so ``>=`` is not read as ``>``.
_COMPARISON_PREFIXES: tuple[tuple[str, FilterOperator], ...] = (
    ("<=", FilterOperator.LESS_THAN_EQUAL),
    (">=", FilterOperator.GREATER_THAN_EQUAL),
    ("!=", FilterOperator.NOT_EQUAL),
    ("<", FilterOperator.LESS_THAN),
    (">", FilterOperator.GREATER_THAN),
)


class FilterClause(BaseModel):
    """A single filter value split into operator and operand."""

    model_config = ConfigDict(frozen=True)

    operator: FilterOperator
    value: str


def parse_filter_value(value: str) -> FilterClause:
    """Classify ``value`` by its comparison prefix or ``*`` wildcards."""
    for prefix, operator in _COMPARISON_PREFIXES:
        if value.startswith(prefix):
            return FilterClause(operator=operator, value=value[len(prefix) :])

    leading = value.startswith("*")
    trailing = value.endswith("*")
    inner = value.strip("*")
    if not inner:
        return FilterClause(operator=FilterOperator.EXACT, value=value)
    if leading and trailing:
        return FilterClause(operator=FilterOperator.CONTAINS, value=value[1:-1])
    if leading:
        return FilterClause(operator=FilterOperator.ENDS_WITH, value=value[1:])
    if trailing:
        return FilterClause(operator=FilterOperator.BEGINS_WITH, value=value[:-1])
    return FilterClause(operator=FilterOperator.EXACT, value=value)


def group_filters(options: Options) -> dict[FilterOperator, dict[str, list[str]]]:
    """Group every filter value of ``options`` under its operator."""
    grouped: dict[FilterOperator, dict[str, list[str]]] = {
        operator: {} for operator in FilterOperator
    }
    for field, values in options.filter.items():
        for raw in values:
            clause = parse_filter_value(raw)
            grouped[clause.operator].setdefault(field, []).append(clause.value)
    return grouped
