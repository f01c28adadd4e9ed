"""Statistics queries for the balance, income/expense and stats views."""

from kakeibo.application.queries.statistics.balance_summary_query import (
    BalanceSummaryQuery,
)
from kakeibo.application.queries.statistics.transaction_stats_query import (
    TransactionStatsQuery,
)
from kakeibo.application.queries.statistics.type_statistics_query import (
    ExpenseStatisticsQuery,
    IncomeStatisticsQuery,
    TypeStatisticsQuery,
)

__all__ = [
    "BalanceSummaryQuery",
    "ExpenseStatisticsQuery",
    "IncomeStatisticsQuery",
    "TransactionStatsQuery",
    "TypeStatisticsQuery",
]
