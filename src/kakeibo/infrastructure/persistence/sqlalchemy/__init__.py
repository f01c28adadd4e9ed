"""SQLAlchemy persistence for the statistics engine."""

from kakeibo.infrastructure.persistence.sqlalchemy.adapters.statistics import (
    SqlAlchemyAggregateQueryAdapter,
)
from kakeibo.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
    create_tables,
)
from kakeibo.infrastructure.persistence.sqlalchemy.factory import (
    SQLAlchemyStatisticsFactory,
)

__all__ = [
    "SQLAlchemyStatisticsFactory",
    "SqlAlchemyAggregateQueryAdapter",
    "create_engine",
    "create_session_factory",
    "create_tables",
]
