"""Income / expense statistics queries."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from kakeibo.application.dtos.statistics import TypeStatistics
from kakeibo.application.ports.statistics import (
    AggregateQueryPort,
    AggregationFilter,
    CategoryLookup,
)
from kakeibo.application.services.statistics import (
    StatisticsAggregator,
    assemble_type_statistics,
)
from kakeibo.application.services.statistics.derived_metrics import (
    UNKNOWN_CATEGORY_LABEL,
)
from kakeibo.domain.shared.time import utc_now
from kakeibo.domain.statistics import TransactionType
from kakeibo.domain.statistics.services import calculate_statistics_periods

if TYPE_CHECKING:
    from kakeibo.application.factories import StatisticsPortFactory


class TypeStatisticsQuery:
    """Current/last month and year totals for one transaction type.

    Subclasses fix ``transaction_type``.
    """

    transaction_type: TransactionType

    def __init__(
        self,
        aggregate_query_port: AggregateQueryPort,
        category_lookup: CategoryLookup,
        *,
        unknown_label: str = UNKNOWN_CATEGORY_LABEL,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._aggregator = StatisticsAggregator(aggregate_query_port)
        self._category_lookup = category_lookup
        self._unknown_label = unknown_label
        self._clock = clock

    @classmethod
    def from_factory(cls, factory: StatisticsPortFactory) -> TypeStatisticsQuery:
        return cls(
            aggregate_query_port=factory.aggregate_query_port(),
            category_lookup=factory.category_lookup(),
            unknown_label=factory.unknown_category_label(),
        )

    async def execute(
        self,
        now: datetime | None = None,
        category_id: int | None = None,
    ) -> TypeStatistics:
        periods = calculate_statistics_periods(now or self._clock())
        bundle = await self._aggregator.aggregate(
            periods,
            self.transaction_type,
            AggregationFilter(category_id=category_id),
        )
        return assemble_type_statistics(
            bundle,
            self._category_lookup,
            unknown_label=self._unknown_label,
        )


class IncomeStatisticsQuery(TypeStatisticsQuery):
    """Income statistics with a breakdown by income source."""

    transaction_type = TransactionType.INCOME


class ExpenseStatisticsQuery(TypeStatisticsQuery):
    """Expense statistics with a breakdown by spending category."""

    transaction_type = TransactionType.EXPENSE
