"""Value objects for the statistics domain."""

from kakeibo.domain.statistics.value_objects.period import Period, StatisticsPeriods
from kakeibo.domain.statistics.value_objects.transaction_type import TransactionType
from kakeibo.domain.statistics.value_objects.trend import Trend

__all__ = [
    "Period",
    "StatisticsPeriods",
    "TransactionType",
    "Trend",
]
