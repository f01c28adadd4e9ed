"""Entities for the statistics domain."""

from kakeibo.domain.statistics.entities.category import Category
from kakeibo.domain.statistics.entities.transaction import Transaction

__all__ = ["Category", "Transaction"]
