"""Transaction type enum."""

from enum import Enum

from kakeibo.domain.statistics.exceptions import InvalidTransactionTypeError


class TransactionType(str, Enum):
    """Direction of a household transaction.

    The string inheritance allows direct JSON serialization.
    """

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_string(cls, value: str) -> "TransactionType":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidTransactionTypeError(value, [t.value for t in cls]) from None
