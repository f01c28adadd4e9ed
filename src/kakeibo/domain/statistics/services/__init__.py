"""Pure domain services for statistics."""

from kakeibo.domain.statistics.services.period_calculator import (
    calculate_statistics_periods,
    month_period,
    previous_month,
    year_period,
)

__all__ = [
    "calculate_statistics_periods",
    "month_period",
    "previous_month",
    "year_period",
]
