"""Statistics domain: periods, transactions and categories."""

from kakeibo.domain.statistics.category_catalog import (
    DEFAULT_CATEGORY_CATALOG,
    CategoryCatalog,
)
from kakeibo.domain.statistics.entities import Category, Transaction
from kakeibo.domain.statistics.exceptions import (
    InvalidTransactionTypeError,
    MalformedPeriodError,
)
from kakeibo.domain.statistics.value_objects import (
    Period,
    StatisticsPeriods,
    TransactionType,
    Trend,
)

__all__ = [
    "DEFAULT_CATEGORY_CATALOG",
    "Category",
    "CategoryCatalog",
    "InvalidTransactionTypeError",
    "MalformedPeriodError",
    "Period",
    "StatisticsPeriods",
    "Transaction",
    "TransactionType",
    "Trend",
]
