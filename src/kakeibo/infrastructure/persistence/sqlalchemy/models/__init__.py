"""SQLAlchemy models (importing registers them with Base.metadata)."""

from kakeibo.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from kakeibo.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)

__all__ = ["Base", "TimestampMixin", "TransactionModel"]
