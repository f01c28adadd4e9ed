"""Aggregate query port (read side).

The statistics engine requests grouped sums through this interface and never
learns how they are computed (SQL aggregate functions, an in-memory reduce,
a document store). Implementations may return ``None`` totals for "no rows".
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Protocol

from kakeibo.application.dtos.statistics import CategoryAggregateRow, RawAggregate
from kakeibo.domain.statistics import Period, TransactionType

CategoryLookup = Callable[[int], Optional[str]]
"""Resolve a category id to its display name (``None`` when unknown)."""


@dataclass(frozen=True)
class AggregationFilter:
    """Optional scoping applied to every query of one aggregation call."""

    category_id: int | None = None


class AggregateQueryPort(Protocol):
    """Grouped sums/counts over the transaction store."""

    async def sum_and_count_by_type(
        self,
        transaction_type: TransactionType,
        period: Period | None = None,
        *,
        category_id: int | None = None,
    ) -> RawAggregate:
        """Sum and count of one transaction type.

        ``period`` of ``None`` covers every recorded transaction.
        """
        ...

    async def sum_by_type_and_category(
        self,
        transaction_type: TransactionType | None,
        period: Period | None = None,
        *,
        category_id: int | None = None,
    ) -> list[CategoryAggregateRow]:
        """Sums grouped by category.

        ``transaction_type`` of ``None`` groups across both types.
        """
        ...
