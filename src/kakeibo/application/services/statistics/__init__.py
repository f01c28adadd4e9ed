"""Statistics engine: aggregation, derived metrics and result assembly."""

from kakeibo.application.services.statistics import derived_metrics
from kakeibo.application.services.statistics.result_assembler import (
    assemble_balance_summary,
    assemble_transaction_stats,
    assemble_type_statistics,
)
from kakeibo.application.services.statistics.statistics_aggregator import (
    StatisticsAggregator,
)

__all__ = [
    "StatisticsAggregator",
    "assemble_balance_summary",
    "assemble_transaction_stats",
    "assemble_type_statistics",
    "derived_metrics",
]
