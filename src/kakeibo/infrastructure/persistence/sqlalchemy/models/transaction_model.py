"""SQLAlchemy model for household transactions."""

from __future__ import annotations

import datetime
from decimal import Decimal

from sqlalchemy import Date, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from kakeibo.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin):
    """Database model for income/expense transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        Index("ix_transactions_type_date", "type", "date"),
        Index("ix_transactions_category_id", "category_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="income or expense",
    )
    # Numeric id from the category catalog; NULL for uncategorized rows
    category_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, type={self.type}, "
            f"amount={self.amount}, date={self.date})>"
        )
