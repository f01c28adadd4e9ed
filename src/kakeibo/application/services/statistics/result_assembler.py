"""Assemble public statistics results from raw aggregate bundles."""

from __future__ import annotations

import logging

from kakeibo.application.dtos.statistics import (
    BalanceAggregateBundle,
    BalanceSummary,
    LifetimeAggregateBundle,
    PeriodAggregateBundle,
    TransactionStats,
    TypeStatistics,
)
from kakeibo.application.ports.statistics import CategoryLookup
from kakeibo.application.services.statistics.derived_metrics import (
    UNKNOWN_CATEGORY_LABEL,
    ZERO,
    category_breakdown,
    extract_amount,
    extract_count,
    month_over_month,
    savings_rate,
    trend,
)

logger = logging.getLogger(__name__)


def assemble_balance_summary(
    bundle: BalanceAggregateBundle,
    period_key: str = "",
) -> BalanceSummary:
    income = extract_amount(bundle.income)
    expense = extract_amount(bundle.expense)
    balance = income - expense

    summary = BalanceSummary(
        income=income,
        expense=expense,
        balance=balance,
        savings_rate=savings_rate(balance, income),
        trend=trend(balance),
        period=period_key,
    )
    logger.debug("Balance summary %s: %s", period_key, summary)
    return summary


def assemble_type_statistics(
    bundle: PeriodAggregateBundle,
    category_lookup: CategoryLookup,
    *,
    unknown_label: str = UNKNOWN_CATEGORY_LABEL,
) -> TypeStatistics:
    """Month/year totals with the current month broken down by category.

    Breakdown percentages are relative to the current month total.
    """
    current_month = extract_amount(bundle.current_month)
    last_month = extract_amount(bundle.last_month)

    return TypeStatistics(
        current_month=current_month,
        last_month=last_month,
        current_year=extract_amount(bundle.current_year),
        month_over_month=month_over_month(current_month, last_month),
        category_breakdown=category_breakdown(
            bundle.current_month_by_category,
            current_month,
            category_lookup,
            unknown_label=unknown_label,
        ),
    )


def assemble_transaction_stats(
    bundle: LifetimeAggregateBundle,
    category_lookup: CategoryLookup,
    *,
    unknown_label: str = UNKNOWN_CATEGORY_LABEL,
) -> TransactionStats:
    """Lifetime totals. Breakdown percentages are relative to income + expense."""
    total_income = extract_amount(bundle.income)
    total_expense = extract_amount(bundle.expense)
    income_count = extract_count(bundle.income)
    expense_count = extract_count(bundle.expense)
    transaction_count = income_count + expense_count
    turnover = total_income + total_expense

    avg_transaction = turnover / transaction_count if transaction_count > 0 else ZERO

    return TransactionStats(
        total_income=total_income,
        total_expense=total_expense,
        net_amount=total_income - total_expense,
        transaction_count=transaction_count,
        income_count=income_count,
        expense_count=expense_count,
        avg_transaction=avg_transaction,
        category_breakdown=category_breakdown(
            bundle.by_category,
            turnover,
            category_lookup,
            unknown_label=unknown_label,
        ),
    )
