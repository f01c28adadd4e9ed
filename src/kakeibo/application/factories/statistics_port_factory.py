"""Statistics port factory protocol for application layer."""

from __future__ import annotations

from typing import Protocol

from kakeibo.application.ports.statistics import AggregateQueryPort, CategoryLookup


class StatisticsPortFactory(Protocol):
    """Protocol for creating the collaborators statistics queries need."""

    def aggregate_query_port(self) -> AggregateQueryPort:
        """Get the aggregate query port."""
        ...

    def category_lookup(self) -> CategoryLookup:
        """Get the category name resolver."""
        ...

    def unknown_category_label(self) -> str:
        """Display name for categories the lookup cannot resolve."""
        ...
