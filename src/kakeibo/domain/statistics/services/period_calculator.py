"""Calendar period boundaries for statistics queries."""

from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime

from kakeibo.domain.shared.time import calendar_date
from kakeibo.domain.statistics.value_objects import Period, StatisticsPeriods


def month_period(year: int, month: int) -> Period:
    """First through last calendar day of the given month."""
    last_day = monthrange(year, month)[1]
    return Period(date(year, month, 1), date(year, month, last_day))


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def year_period(year: int) -> Period:
    return Period(date(year, 1, 1), date(year, 12, 31))


def calculate_statistics_periods(now: date | datetime) -> StatisticsPeriods:
    """Compute current month, previous month and current year for ``now``.

    Pure: the reference instant is always passed in, never read from the
    clock. A ``datetime`` is interpreted in its own timezone.
    """
    today = calendar_date(now)
    last_year, last_month = previous_month(today.year, today.month)

    return StatisticsPeriods(
        reference_date=today,
        current_month=month_period(today.year, today.month),
        last_month=month_period(last_year, last_month),
        current_year=year_period(today.year),
    )
