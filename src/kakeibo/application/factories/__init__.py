"""Application factories."""

from kakeibo.application.factories.statistics_port_factory import (
    StatisticsPortFactory,
)

__all__ = ["StatisticsPortFactory"]
