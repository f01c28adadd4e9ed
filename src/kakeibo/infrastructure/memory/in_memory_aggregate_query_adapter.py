"""In-memory implementation of AggregateQueryPort.

Reduces a list of Transaction read models in Python. Mirrors SQL aggregate
semantics: a sum over no rows is ``None``, and rows without a category form
their own ``None`` group.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from kakeibo.application.dtos.statistics import CategoryAggregateRow, RawAggregate
from kakeibo.application.ports.statistics import AggregateQueryPort
from kakeibo.domain.statistics import Period, Transaction, TransactionType


class InMemoryAggregateQueryAdapter(AggregateQueryPort):
    """Aggregate query adapter over an in-memory transaction list."""

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: list[Transaction] = list(transactions)

    def add(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    async def sum_and_count_by_type(
        self,
        transaction_type: TransactionType,
        period: Period | None = None,
        *,
        category_id: int | None = None,
    ) -> RawAggregate:
        matching = self._select(transaction_type, period, category_id)
        if not matching:
            return RawAggregate(total_amount=None, count=0)
        return RawAggregate(
            total_amount=sum((t.amount for t in matching), Decimal("0")),
            count=len(matching),
        )

    async def sum_by_type_and_category(
        self,
        transaction_type: TransactionType | None,
        period: Period | None = None,
        *,
        category_id: int | None = None,
    ) -> list[CategoryAggregateRow]:
        totals: dict[int | None, Decimal] = {}
        for txn in self._select(transaction_type, period, category_id):
            totals[txn.category_id] = totals.get(txn.category_id, Decimal("0")) + (
                txn.amount
            )
        return [
            CategoryAggregateRow(category_id=cat_id, total_amount=total)
            for cat_id, total in totals.items()
        ]

    def _select(
        self,
        transaction_type: TransactionType | None,
        period: Period | None,
        category_id: int | None,
    ) -> list[Transaction]:
        return [
            t
            for t in self._transactions
            if (transaction_type is None or t.type is transaction_type)
            and (period is None or period.contains(t.date))
            and (category_id is None or t.category_id == category_id)
        ]
