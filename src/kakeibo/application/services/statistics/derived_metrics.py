"""Derived metrics over raw aggregates.

Every function here is pure. Ratios are guarded against a zero (or negative)
denominator and return zero instead of raising or producing NaN/Infinity.
Percentages are rounded to one decimal, half away from zero.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from kakeibo.application.dtos.statistics import (
    CategoryAggregateRow,
    CategoryBreakdownEntry,
    RawAmount,
)
from kakeibo.application.ports.statistics import CategoryLookup
from kakeibo.domain.statistics import Trend

ZERO = Decimal("0")
ZERO_PERCENT = Decimal("0.0")
HUNDRED = Decimal("100")
PERCENT_QUANTUM = Decimal("0.1")
UNKNOWN_CATEGORY_LABEL = "Unknown category"


class _HasTotalAmount(Protocol):
    @property
    def total_amount(self) -> RawAmount: ...


def to_decimal(value: RawAmount) -> Decimal:
    """Coerce a raw SQL/JSON number to Decimal; ``None`` becomes zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str) and not value.strip():
        return ZERO
    return Decimal(str(value))


def round_percentage(value: Decimal) -> Decimal:
    return value.quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)


def extract_amount(raw: _HasTotalAmount | None) -> Decimal:
    """Total of a raw aggregate; a missing aggregate or null total is zero."""
    if raw is None:
        return ZERO
    return to_decimal(raw.total_amount)


def extract_count(raw: object | None) -> int:
    count = getattr(raw, "count", None)
    return int(count) if count is not None else 0


def month_over_month(current: Decimal, previous: Decimal) -> Decimal:
    """Percentage change from ``previous`` to ``current``.

    Zero when ``previous`` is zero, whatever ``current`` is.
    """
    if previous == 0:
        return ZERO_PERCENT
    return round_percentage((current - previous) / previous * HUNDRED)


def savings_rate(balance: Decimal, income: Decimal) -> Decimal:
    """Share of income kept, in percent. Zero without positive income."""
    if income <= 0:
        return ZERO_PERCENT
    return round_percentage(balance / income * HUNDRED)


def trend(balance: Decimal) -> Trend:
    if balance > 0:
        return Trend.POSITIVE
    if balance < 0:
        return Trend.NEGATIVE
    return Trend.NEUTRAL


def percentage_of(amount: Decimal, total: Decimal) -> Decimal:
    if total == 0:
        return ZERO_PERCENT
    return round_percentage(amount / total * HUNDRED)


def _resolve_name(
    category_id: int,
    category_lookup: CategoryLookup,
    unknown_label: str,
) -> str:
    name = category_lookup(category_id)
    return unknown_label if name is None else name


def category_breakdown(
    rows: Iterable[CategoryAggregateRow],
    total_for_percentage: Decimal,
    category_lookup: CategoryLookup,
    *,
    unknown_label: str = UNKNOWN_CATEGORY_LABEL,
) -> list[CategoryBreakdownEntry]:
    """Turn per-category sums into breakdown entries.

    Rows without a category or without a total are dropped. The result is
    sorted by amount, largest first; equal amounts keep their input order.
    """
    entries = [
        CategoryBreakdownEntry(
            category_id=row.category_id,
            name=_resolve_name(row.category_id, category_lookup, unknown_label),
            amount=to_decimal(row.total_amount),
            percentage=percentage_of(
                to_decimal(row.total_amount),
                total_for_percentage,
            ),
        )
        for row in rows
        if row.category_id is not None and row.total_amount is not None
    ]
    # sorted() with reverse=True stays stable for equal keys
    return sorted(entries, key=lambda e: e.amount, reverse=True)
