"""Tests for the pure derived-metric functions."""

from decimal import Decimal

import pytest

from kakeibo.application.dtos.statistics import CategoryAggregateRow, RawAggregate
from kakeibo.application.services.statistics.derived_metrics import (
    UNKNOWN_CATEGORY_LABEL,
    category_breakdown,
    extract_amount,
    extract_count,
    month_over_month,
    savings_rate,
    to_decimal,
    trend,
)
from kakeibo.domain.statistics import Trend

NAMES = {1: "Food", 2: "Rent", 3: "Travel"}


def lookup(category_id):
    return NAMES.get(category_id)


class TestExtractAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (RawAggregate(total_amount="50000"), Decimal("50000")),
            (RawAggregate(total_amount=1250), Decimal("1250")),
            (RawAggregate(total_amount=12.5), Decimal("12.5")),
            (RawAggregate(total_amount=Decimal("3.30")), Decimal("3.30")),
            (RawAggregate(total_amount=None), Decimal("0")),
            (RawAggregate(total_amount=""), Decimal("0")),
            (None, Decimal("0")),
        ],
    )
    def test_normalizes_raw_totals(self, raw, expected):
        assert extract_amount(raw) == expected

    def test_float_is_converted_through_its_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_extract_count(self):
        assert extract_count(RawAggregate(total_amount="10", count=4)) == 4
        assert extract_count(RawAggregate(total_amount=None, count=None)) == 0
        assert extract_count(None) == 0


class TestMonthOverMonth:
    def test_growth(self):
        assert month_over_month(Decimal("50000"), Decimal("40000")) == Decimal("25.0")

    def test_decline(self):
        assert month_over_month(Decimal("30000"), Decimal("40000")) == Decimal("-25.0")

    @pytest.mark.parametrize("current", ["0", "1", "99999.99", "-10"])
    def test_zero_previous_yields_zero(self, current):
        result = month_over_month(Decimal(current), Decimal("0"))

        assert result == 0
        assert result.is_finite()

    def test_rounds_half_away_from_zero(self):
        # 0.25% exactly -> 0.3, -0.25% exactly -> -0.3
        assert month_over_month(Decimal("100.25"), Decimal("100")) == Decimal("0.3")
        assert month_over_month(Decimal("99.75"), Decimal("100")) == Decimal("-0.3")

    def test_rounds_to_one_decimal(self):
        assert month_over_month(Decimal("4"), Decimal("3")) == Decimal("33.3")


class TestSavingsRate:
    def test_positive_income(self):
        assert savings_rate(Decimal("2000"), Decimal("5000")) == Decimal("40.0")

    def test_negative_balance(self):
        assert savings_rate(Decimal("-1000"), Decimal("3000")) == Decimal("-33.3")

    @pytest.mark.parametrize("income", ["0", "-1", "-5000"])
    def test_non_positive_income_yields_zero(self, income):
        assert savings_rate(Decimal("-300"), Decimal(income)) == 0


class TestTrend:
    @pytest.mark.parametrize(
        ("balance", "expected"),
        [
            ("0.01", Trend.POSITIVE),
            ("120000", Trend.POSITIVE),
            ("-0.01", Trend.NEGATIVE),
            ("-5", Trend.NEGATIVE),
            ("0", Trend.NEUTRAL),
            ("0.00", Trend.NEUTRAL),
            ("-0", Trend.NEUTRAL),
        ],
    )
    def test_exact_comparison_against_zero(self, balance, expected):
        assert trend(Decimal(balance)) is expected


class TestCategoryBreakdown:
    def test_income_scenario(self):
        rows = [
            CategoryAggregateRow(category_id=1, total_amount="30000"),
            CategoryAggregateRow(category_id=2, total_amount="20000"),
        ]

        entries = category_breakdown(rows, Decimal("50000"), lookup)

        assert [(e.category_id, e.amount, e.percentage) for e in entries] == [
            (1, Decimal("30000"), Decimal("60.0")),
            (2, Decimal("20000"), Decimal("40.0")),
        ]
        assert [e.name for e in entries] == ["Food", "Rent"]

    def test_rows_without_category_or_total_are_dropped(self):
        rows = [
            CategoryAggregateRow(category_id=None, total_amount="500"),
            CategoryAggregateRow(category_id=2, total_amount=None),
            CategoryAggregateRow(category_id=3, total_amount="100"),
        ]

        entries = category_breakdown(rows, Decimal("600"), lookup)

        assert [e.category_id for e in entries] == [3]
        assert all(e.category_id is not None for e in entries)

    def test_sorted_descending_by_amount(self):
        rows = [
            CategoryAggregateRow(category_id=1, total_amount="10"),
            CategoryAggregateRow(category_id=2, total_amount="300"),
            CategoryAggregateRow(category_id=3, total_amount="45.5"),
        ]

        entries = category_breakdown(rows, Decimal("355.5"), lookup)

        assert [e.category_id for e in entries] == [2, 3, 1]

    def test_ties_keep_input_order(self):
        rows = [
            CategoryAggregateRow(category_id=3, total_amount="100"),
            CategoryAggregateRow(category_id=1, total_amount="100"),
            CategoryAggregateRow(category_id=2, total_amount="100"),
        ]

        entries = category_breakdown(rows, Decimal("300"), lookup)

        assert [e.category_id for e in entries] == [3, 1, 2]

    def test_zero_total_yields_zero_percentages(self):
        rows = [
            CategoryAggregateRow(category_id=1, total_amount="30"),
            CategoryAggregateRow(category_id=2, total_amount="20"),
        ]

        entries = category_breakdown(rows, extract_amount(RawAggregate()), lookup)

        assert [e.percentage for e in entries] == [0, 0]
        assert all(e.percentage.is_finite() for e in entries)

    def test_unknown_category_gets_placeholder_name(self):
        rows = [CategoryAggregateRow(category_id=42, total_amount="10")]

        entries = category_breakdown(rows, Decimal("10"), lookup)

        assert entries[0].name == UNKNOWN_CATEGORY_LABEL

    def test_custom_unknown_label(self):
        rows = [CategoryAggregateRow(category_id=42, total_amount="10")]

        entries = category_breakdown(
            rows,
            Decimal("10"),
            lookup,
            unknown_label="Uncategorized",
        )

        assert entries[0].name == "Uncategorized"

    def test_empty_name_from_lookup_is_kept(self):
        rows = [CategoryAggregateRow(category_id=5, total_amount="10")]

        entries = category_breakdown(rows, Decimal("10"), lambda _id: "")

        assert entries[0].name == ""

    @pytest.mark.parametrize(
        "amounts",
        [
            ["1", "1", "1"],
            ["10", "20", "30", "40"],
            ["33.33", "33.33", "33.34"],
            ["0.01", "999.99", "123.45", "7"],
        ],
    )
    def test_percentages_sum_to_hundred_within_rounding(self, amounts):
        rows = [
            CategoryAggregateRow(category_id=i, total_amount=a)
            for i, a in enumerate(amounts, start=1)
        ]
        total = sum((Decimal(a) for a in amounts), Decimal("0"))

        entries = category_breakdown(rows, total, lookup)

        assert abs(sum(e.percentage for e in entries) - 100) <= Decimal("0.1")
