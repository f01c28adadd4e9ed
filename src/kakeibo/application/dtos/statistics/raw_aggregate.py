"""Raw aggregate shapes returned by the aggregate query port.

These exist only for the duration of one statistics call. ``None`` totals mean
"no rows" and are normalized to zero before any arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

RawAmount = Union[Decimal, int, float, str, None]


@dataclass(frozen=True)
class RawAggregate:
    """Sum (and optionally count) of one transaction type over one period."""

    total_amount: RawAmount = None
    count: int | None = None


@dataclass(frozen=True)
class CategoryAggregateRow:
    """Sum of one category over one period (one ``GROUP BY`` row)."""

    category_id: int | None
    total_amount: RawAmount = None


@dataclass(frozen=True)
class PeriodAggregateBundle:
    """Raw results for a single transaction type across the statistics periods."""

    current_month: RawAggregate
    last_month: RawAggregate
    current_year: RawAggregate
    current_month_by_category: list[CategoryAggregateRow] = field(
        default_factory=list,
    )


@dataclass(frozen=True)
class BalanceAggregateBundle:
    """Raw income and expense totals for one month."""

    income: RawAggregate
    expense: RawAggregate


@dataclass(frozen=True)
class LifetimeAggregateBundle:
    """Raw totals over every recorded transaction."""

    income: RawAggregate
    expense: RawAggregate
    by_category: list[CategoryAggregateRow] = field(default_factory=list)
