"""Unit tests for the income/expense statistics queries."""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from kakeibo.application.dtos.statistics import CategoryAggregateRow, RawAggregate
from kakeibo.application.queries.statistics import (
    ExpenseStatisticsQuery,
    IncomeStatisticsQuery,
)
from kakeibo.domain.statistics import DEFAULT_CATEGORY_CATALOG, TransactionType

lookup = DEFAULT_CATEGORY_CATALOG.lookup


class TestIncomeStatisticsQuery:
    @pytest.mark.asyncio
    async def test_income_statistics(self, memory_port, now):
        stats = await IncomeStatisticsQuery(memory_port, lookup).execute(now=now)

        assert stats.current_month == Decimal("50000")
        assert stats.last_month == Decimal("40000")
        assert stats.current_year == Decimal("100000")
        assert stats.month_over_month == Decimal("25.0")
        assert [
            (e.category_id, e.name, e.amount, e.percentage)
            for e in stats.category_breakdown
        ] == [
            (101, "Salary", Decimal("30000"), Decimal("60.0")),
            (102, "Bonus", Decimal("20000"), Decimal("40.0")),
        ]

    @pytest.mark.asyncio
    async def test_category_filter_narrows_every_total(self, memory_port, now):
        stats = await IncomeStatisticsQuery(memory_port, lookup).execute(
            now=now,
            category_id=101,
        )

        assert stats.current_month == Decimal("30000")
        assert stats.last_month == Decimal("40000")
        assert stats.month_over_month == Decimal("-25.0")
        assert [e.category_id for e in stats.category_breakdown] == [101]
        assert stats.category_breakdown[0].percentage == Decimal("100.0")

    @pytest.mark.asyncio
    async def test_string_totals_from_port(self, now):
        port = AsyncMock()
        port.sum_and_count_by_type.side_effect = [
            RawAggregate(total_amount="50000"),
            RawAggregate(total_amount="40000"),
            RawAggregate(total_amount="50000"),
        ]
        port.sum_by_type_and_category.return_value = [
            CategoryAggregateRow(category_id=1, total_amount="30000"),
            CategoryAggregateRow(category_id=2, total_amount="20000"),
        ]
        names = {1: "Salary", 2: "Freelance"}

        stats = await IncomeStatisticsQuery(port, names.get).execute(now=now)

        assert stats.current_month == 50000
        assert stats.last_month == 40000
        assert stats.month_over_month == Decimal("25.0")
        assert [(e.category_id, e.amount, e.percentage) for e in stats.category_breakdown] == [
            (1, 30000, Decimal("60.0")),
            (2, 20000, Decimal("40.0")),
        ]
        assert all(
            c.args[0] is TransactionType.INCOME
            for c in port.sum_and_count_by_type.await_args_list
        )


class TestExpenseStatisticsQuery:
    @pytest.mark.asyncio
    async def test_expense_statistics(self, memory_port, now):
        stats = await ExpenseStatisticsQuery(
            memory_port,
            lookup,
            unknown_label="Uncategorized",
        ).execute(now=now)

        assert stats.current_month == Decimal("20500")
        assert stats.last_month == Decimal("9000")
        assert stats.current_year == Decimal("29500")
        assert stats.month_over_month == Decimal("127.8")
        # The uncategorized 500 is excluded from the breakdown
        assert [(e.name, e.percentage) for e in stats.category_breakdown] == [
            ("Rent, Utilities & Phone", Decimal("58.5")),
            ("Food", Decimal("39.0")),
        ]


class TestTypeStatisticsQueryDependencyInjection:
    @pytest.mark.parametrize("query_cls", [IncomeStatisticsQuery, ExpenseStatisticsQuery])
    def test_from_factory_creates_query(self, query_cls):
        mock_factory = Mock()
        mock_factory.aggregate_query_port.return_value = AsyncMock()
        mock_factory.category_lookup.return_value = lookup
        mock_factory.unknown_category_label.return_value = "n/a"

        query = query_cls.from_factory(mock_factory)

        assert isinstance(query, query_cls)
        mock_factory.aggregate_query_port.assert_called_once()
        mock_factory.category_lookup.assert_called_once()
