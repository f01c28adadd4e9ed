"""Shared fixtures for statistics query tests."""

from datetime import date, datetime, timezone

import pytest

from kakeibo.domain.statistics import Transaction, TransactionType
from kakeibo.infrastructure.memory import InMemoryAggregateQueryAdapter

NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


def _txn(amount, txn_type, day, category_id=None):
    return Transaction(
        amount=amount,
        type=txn_type,
        date=day,
        category_id=category_id,
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def sample_transactions():
    """Income and expenses across Feb/Mar 2024 plus one row from 2023."""
    income = TransactionType.INCOME
    expense = TransactionType.EXPENSE
    return [
        # March 2024
        _txn("30000", income, date(2024, 3, 1), 101),
        _txn("20000", income, date(2024, 3, 31), 102),
        _txn("8000", expense, date(2024, 3, 5), 3),
        _txn("12000", expense, date(2024, 3, 10), 1),
        _txn("500", expense, date(2024, 3, 12), None),
        # February 2024 (leap day included)
        _txn("40000", income, date(2024, 2, 29), 101),
        _txn("9000", expense, date(2024, 2, 1), 3),
        # January 2024
        _txn("10000", income, date(2024, 1, 20), 104),
        # Previous year, outside every period
        _txn("99999", income, date(2023, 12, 31), 101),
    ]


@pytest.fixture
def memory_port(sample_transactions):
    return InMemoryAggregateQueryAdapter(sample_transactions)
