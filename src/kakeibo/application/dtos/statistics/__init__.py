"""Statistics DTOs - raw aggregates and assembled results."""

from kakeibo.application.dtos.statistics.raw_aggregate import (
    BalanceAggregateBundle,
    CategoryAggregateRow,
    LifetimeAggregateBundle,
    PeriodAggregateBundle,
    RawAggregate,
    RawAmount,
)
from kakeibo.application.dtos.statistics.statistics_dto import (
    BalanceSummary,
    CategoryBreakdownEntry,
    ExpenseStatistics,
    IncomeStatistics,
    TransactionStats,
    TypeStatistics,
)

__all__ = [
    "BalanceAggregateBundle",
    "BalanceSummary",
    "CategoryAggregateRow",
    "CategoryBreakdownEntry",
    "ExpenseStatistics",
    "IncomeStatistics",
    "LifetimeAggregateBundle",
    "PeriodAggregateBundle",
    "RawAggregate",
    "RawAmount",
    "TransactionStats",
    "TypeStatistics",
]
