"""Fan-out/fan-in over the aggregate query port.

Each public method issues the independent queries one statistics result needs,
runs them concurrently and returns only once all of them have completed. If
any query raises, that exception propagates unchanged and no partial bundle is
returned.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

from kakeibo.application.dtos.statistics import (
    BalanceAggregateBundle,
    LifetimeAggregateBundle,
    PeriodAggregateBundle,
)
from kakeibo.application.ports.statistics import (
    AggregateQueryPort,
    AggregationFilter,
)
from kakeibo.domain.statistics import Period, StatisticsPeriods, TransactionType

logger = logging.getLogger(__name__)

NO_FILTER = AggregationFilter()


class StatisticsAggregator:
    """Collect raw totals for the statistics periods."""

    def __init__(self, aggregate_query_port: AggregateQueryPort):
        self._queries = aggregate_query_port

    async def aggregate(
        self,
        periods: StatisticsPeriods,
        transaction_type: TransactionType,
        filters: AggregationFilter = NO_FILTER,
    ) -> PeriodAggregateBundle:
        """Current month, last month, current year and current-month categories."""
        category_id = filters.category_id
        current_month, last_month, current_year, by_category = await self._gather(
            "period totals",
            self._queries.sum_and_count_by_type(
                transaction_type,
                periods.current_month,
                category_id=category_id,
            ),
            self._queries.sum_and_count_by_type(
                transaction_type,
                periods.last_month,
                category_id=category_id,
            ),
            self._queries.sum_and_count_by_type(
                transaction_type,
                periods.current_year,
                category_id=category_id,
            ),
            self._queries.sum_by_type_and_category(
                transaction_type,
                periods.current_month,
                category_id=category_id,
            ),
        )
        return PeriodAggregateBundle(
            current_month=current_month,
            last_month=last_month,
            current_year=current_year,
            current_month_by_category=list(by_category),
        )

    async def aggregate_balance(
        self,
        period: Period,
        filters: AggregationFilter = NO_FILTER,
    ) -> BalanceAggregateBundle:
        """Income and expense totals for a single period."""
        income, expense = await self._gather(
            "balance",
            self._queries.sum_and_count_by_type(
                TransactionType.INCOME,
                period,
                category_id=filters.category_id,
            ),
            self._queries.sum_and_count_by_type(
                TransactionType.EXPENSE,
                period,
                category_id=filters.category_id,
            ),
        )
        return BalanceAggregateBundle(income=income, expense=expense)

    async def aggregate_lifetime(
        self,
        filters: AggregationFilter = NO_FILTER,
    ) -> LifetimeAggregateBundle:
        """Totals, counts and categories over every recorded transaction."""
        income, expense, by_category = await self._gather(
            "lifetime totals",
            self._queries.sum_and_count_by_type(
                TransactionType.INCOME,
                category_id=filters.category_id,
            ),
            self._queries.sum_and_count_by_type(
                TransactionType.EXPENSE,
                category_id=filters.category_id,
            ),
            self._queries.sum_by_type_and_category(
                None,
                category_id=filters.category_id,
            ),
        )
        return LifetimeAggregateBundle(
            income=income,
            expense=expense,
            by_category=list(by_category),
        )

    async def _gather(self, name: str, *queries: Awaitable[Any]) -> list[Any]:
        logger.debug("Aggregating %s (%d queries)", name, len(queries))
        tasks = [asyncio.ensure_future(query) for query in queries]
        try:
            return await asyncio.gather(*tasks)
        except Exception:
            # Siblings still in flight are abandoned, not awaited
            for task in tasks:
                task.cancel()
            logger.warning("Aggregation of %s failed", name)
            raise
