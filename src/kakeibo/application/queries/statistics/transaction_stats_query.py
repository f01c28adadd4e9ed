"""Overall transaction statistics query."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from kakeibo.application.dtos.statistics import TransactionStats, TypeStatistics
from kakeibo.application.ports.statistics import (
    AggregateQueryPort,
    AggregationFilter,
    CategoryLookup,
)
from kakeibo.application.queries.statistics.type_statistics_query import (
    ExpenseStatisticsQuery,
    IncomeStatisticsQuery,
)
from kakeibo.application.services.statistics import (
    StatisticsAggregator,
    assemble_transaction_stats,
)
from kakeibo.application.services.statistics.derived_metrics import (
    UNKNOWN_CATEGORY_LABEL,
)
from kakeibo.domain.shared.time import utc_now
from kakeibo.domain.statistics import TransactionType

if TYPE_CHECKING:
    from kakeibo.application.factories import StatisticsPortFactory

logger = logging.getLogger(__name__)


class TransactionStatsQuery:
    """Lifetime totals, or per-type statistics when a type is requested."""

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
        self._by_type = {
            TransactionType.INCOME: IncomeStatisticsQuery(
                aggregate_query_port,
                category_lookup,
                unknown_label=unknown_label,
                clock=clock,
            ),
            TransactionType.EXPENSE: ExpenseStatisticsQuery(
                aggregate_query_port,
                category_lookup,
                unknown_label=unknown_label,
                clock=clock,
            ),
        }

    @classmethod
    def from_factory(cls, factory: StatisticsPortFactory) -> TransactionStatsQuery:
        return cls(
            aggregate_query_port=factory.aggregate_query_port(),
            category_lookup=factory.category_lookup(),
            unknown_label=factory.unknown_category_label(),
        )

    async def execute(
        self,
        transaction_type: TransactionType | str | None = None,
        now: datetime | None = None,
        category_id: int | None = None,
    ) -> TransactionStats | TypeStatistics:
        """Lifetime stats, or type statistics for ``income``/``expense``.

        Raises InvalidTransactionTypeError for any other type string.
        """
        if transaction_type is not None:
            if not isinstance(transaction_type, TransactionType):
                transaction_type = TransactionType.from_string(transaction_type)
            logger.debug("Delegating stats to %s statistics", transaction_type.value)
            return await self._by_type[transaction_type].execute(
                now=now,
                category_id=category_id,
            )

        bundle = await self._aggregator.aggregate_lifetime(
            AggregationFilter(category_id=category_id),
        )
        return assemble_transaction_stats(
            bundle,
            self._category_lookup,
            unknown_label=self._unknown_label,
        )
