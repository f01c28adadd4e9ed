"""Statistics result DTOs.

All monetary fields are normalized ``Decimal`` values (never ``None``).
``to_dict`` renders the camelCase JSON shape consumed by the frontend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from kakeibo.domain.statistics import Trend


@dataclass(frozen=True)
class CategoryBreakdownEntry:
    """One category's share of a total (one pie slice)."""

    category_id: int
    name: str
    amount: Decimal
    percentage: Decimal  # 0-100 scale, one decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "categoryId": self.category_id,
            "name": self.name,
            "amount": float(self.amount),
            "percentage": float(self.percentage),
        }


@dataclass(frozen=True)
class BalanceSummary:
    """Income, expense and balance of the current month."""

    income: Decimal
    expense: Decimal
    balance: Decimal
    savings_rate: Decimal
    trend: Trend
    period: str = ""  # "YYYY-MM"

    def to_dict(self) -> dict[str, Any]:
        return {
            "income": float(self.income),
            "expense": float(self.expense),
            "balance": float(self.balance),
            "savingsRate": float(self.savings_rate),
            "trend": self.trend.value,
        }


@dataclass(frozen=True)
class TypeStatistics:
    """Month/year totals and breakdown for one transaction type."""

    current_month: Decimal
    last_month: Decimal
    current_year: Decimal
    month_over_month: Decimal
    category_breakdown: list[CategoryBreakdownEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentMonth": float(self.current_month),
            "lastMonth": float(self.last_month),
            "currentYear": float(self.current_year),
            "monthOverMonth": float(self.month_over_month),
            "categoryBreakdown": [e.to_dict() for e in self.category_breakdown],
        }


IncomeStatistics = TypeStatistics
ExpenseStatistics = TypeStatistics


@dataclass(frozen=True)
class TransactionStats:
    """Totals over every recorded transaction."""

    total_income: Decimal
    total_expense: Decimal
    net_amount: Decimal
    transaction_count: int
    income_count: int
    expense_count: int
    avg_transaction: Decimal
    category_breakdown: list[CategoryBreakdownEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": float(self.total_income),
            "totalExpense": float(self.total_expense),
            "netAmount": float(self.net_amount),
            "transactionCount": self.transaction_count,
            "incomeCount": self.income_count,
            "expenseCount": self.expense_count,
            "avgTransaction": float(self.avg_transaction),
            "categoryBreakdown": [e.to_dict() for e in self.category_breakdown],
        }
