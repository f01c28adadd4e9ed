"""Statistics ports.

One query shape per method; implementations return raw, null-tolerant
aggregates and leave all derived arithmetic to the application services.
"""

from kakeibo.application.ports.statistics.aggregate_query_port import (
    AggregateQueryPort,
    AggregationFilter,
    CategoryLookup,
)

__all__ = ["AggregateQueryPort", "AggregationFilter", "CategoryLookup"]
