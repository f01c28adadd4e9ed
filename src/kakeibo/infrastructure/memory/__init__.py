"""In-memory adapters."""

from kakeibo.infrastructure.memory.in_memory_aggregate_query_adapter import (
    InMemoryAggregateQueryAdapter,
)

__all__ = ["InMemoryAggregateQueryAdapter"]
