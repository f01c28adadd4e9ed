"""Period value objects used to scope aggregate queries."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from kakeibo.domain.statistics.exceptions import MalformedPeriodError


class Period(BaseModel):
    """Closed calendar date range ``[start, end]``.

    Both bounds are inclusive. A period whose start lies after its end cannot
    be constructed.
    """

    start: date
    end: date

    model_config = ConfigDict(frozen=True)

    def __init__(
        self,
        start: date | str | None = None,
        end: date | str | None = None,
        **data: Any,
    ):
        """Support both Period(start, end) and Period(start=..., end=...)."""
        if "start" not in data:
            data["start"] = start
        if "end" not in data:
            data["end"] = end
        super().__init__(**data)

    @model_validator(mode="after")
    def _check_bounds(self) -> Period:
        if self.start > self.end:
            raise MalformedPeriodError(self.start, self.end)
        return self

    @property
    def days(self) -> int:
        """Number of calendar days covered (inclusive)."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


class StatisticsPeriods(BaseModel):
    """The three periods every statistics call is scoped by."""

    reference_date: date
    current_month: Period
    last_month: Period
    current_year: Period

    model_config = ConfigDict(frozen=True)

    @property
    def month_key(self) -> str:
        """``YYYY-MM`` key of the reference month."""
        return f"{self.reference_date.year:04d}-{self.reference_date.month:02d}"
