"""Shared domain building blocks."""

from kakeibo.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from kakeibo.domain.shared.time import calendar_date, utc_now

__all__ = [
    "DomainException",
    "ErrorCode",
    "ValidationError",
    "calendar_date",
    "utc_now",
]
