"""Monthly balance summary query."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from kakeibo.application.dtos.statistics import BalanceSummary
from kakeibo.application.ports.statistics import AggregateQueryPort, AggregationFilter
from kakeibo.application.services.statistics import (
    StatisticsAggregator,
    assemble_balance_summary,
)
from kakeibo.domain.shared.time import utc_now
from kakeibo.domain.statistics.services import calculate_statistics_periods

if TYPE_CHECKING:
    from kakeibo.application.factories import StatisticsPortFactory


class BalanceSummaryQuery:
    """Return income, expense, balance, savings rate and trend for this month."""

    def __init__(
        self,
        aggregate_query_port: AggregateQueryPort,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._aggregator = StatisticsAggregator(aggregate_query_port)
        self._clock = clock

    @classmethod
    def from_factory(cls, factory: StatisticsPortFactory) -> BalanceSummaryQuery:
        return cls(aggregate_query_port=factory.aggregate_query_port())

    async def execute(
        self,
        now: datetime | None = None,
        category_id: int | None = None,
    ) -> BalanceSummary:
        periods = calculate_statistics_periods(now or self._clock())
        bundle = await self._aggregator.aggregate_balance(
            periods.current_month,
            AggregationFilter(category_id=category_id),
        )
        return assemble_balance_summary(bundle, period_key=periods.month_key)
