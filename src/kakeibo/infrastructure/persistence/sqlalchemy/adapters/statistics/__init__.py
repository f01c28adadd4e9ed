"""Statistics read adapters."""

from kakeibo.infrastructure.persistence.sqlalchemy.adapters.statistics.sqlalchemy_aggregate_query_adapter import (  # NOQA: E501
    SqlAlchemyAggregateQueryAdapter,
)

__all__ = ["SqlAlchemyAggregateQueryAdapter"]
