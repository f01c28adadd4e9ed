"""SQLAlchemy implementation of AggregateQueryPort.

Sums and counts are computed by the database (``SUM``/``COUNT`` with
``GROUP BY``); only one row per group crosses the wire. ``SUM`` over no rows
yields ``NULL``, which is passed through untouched for the application layer
to normalize.

The aggregator runs several of these queries at once and an ``AsyncSession``
does not allow concurrent statements, so every query checks out its own
short-lived session from the session factory.
"""

from __future__ import annotations

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kakeibo.application.dtos.statistics import CategoryAggregateRow, RawAggregate
from kakeibo.application.ports.statistics import AggregateQueryPort
from kakeibo.domain.statistics import Period, TransactionType
from kakeibo.infrastructure.persistence.sqlalchemy.models import TransactionModel

logger = logging.getLogger(__name__)


class SqlAlchemyAggregateQueryAdapter(AggregateQueryPort):
    """SQLAlchemy aggregate query adapter."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def sum_and_count_by_type(
        self,
        transaction_type: TransactionType,
        period: Period | None = None,
        *,
        category_id: int | None = None,
    ) -> RawAggregate:
        stmt = select(
            func.sum(TransactionModel.amount),
            func.count(TransactionModel.id),
        )
        stmt = self._apply_filters(stmt, transaction_type, period, category_id)

        async with self._session_factory() as session:
            total_amount, count = (await session.execute(stmt)).one()
        logger.debug(
            "sum_and_count_by_type(%s, %s) -> %s / %s",
            transaction_type.value,
            period,
            total_amount,
            count,
        )
        return RawAggregate(total_amount=total_amount, count=count)

    async def sum_by_type_and_category(
        self,
        transaction_type: TransactionType | None,
        period: Period | None = None,
        *,
        category_id: int | None = None,
    ) -> list[CategoryAggregateRow]:
        stmt = select(
            TransactionModel.category_id,
            func.sum(TransactionModel.amount),
        ).group_by(TransactionModel.category_id)
        stmt = self._apply_filters(stmt, transaction_type, period, category_id)

        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).all()
        return [
            CategoryAggregateRow(category_id=cat_id, total_amount=total)
            for cat_id, total in rows
        ]

    def _apply_filters(
        self,
        stmt: Select,
        transaction_type: TransactionType | None,
        period: Period | None,
        category_id: int | None,
    ) -> Select:
        if transaction_type is not None:
            stmt = stmt.where(TransactionModel.type == transaction_type.value)
        if period is not None:
            stmt = stmt.where(
                TransactionModel.date >= period.start,
                TransactionModel.date <= period.end,
            )
        if category_id is not None:
            stmt = stmt.where(TransactionModel.category_id == category_id)
        return stmt
