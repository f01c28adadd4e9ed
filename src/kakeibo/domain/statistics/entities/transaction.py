"""Read model of a recorded income/expense transaction."""

from __future__ import annotations

import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from kakeibo.domain.statistics.value_objects import TransactionType


class Transaction(BaseModel):
    """A transaction as the statistics engine sees it.

    Immutable once fetched; the engine only reads it.
    """

    amount: Decimal
    type: TransactionType
    date: datetime.date
    category_id: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        if not isinstance(v, Decimal):
            try:
                v = Decimal(str(v))
            except InvalidOperation:
                msg = f"Transaction amount must be a positive number, got {v!r}"
                raise ValueError(msg) from None
        if not v.is_finite() or v <= 0:
            msg = f"Transaction amount must be a positive number, got {v}"
            raise ValueError(msg)
        return v

    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    def is_expense(self) -> bool:
        return self.type is TransactionType.EXPENSE
