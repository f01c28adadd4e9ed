"""SQLAlchemy factory wiring statistics queries to the database."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kakeibo.application.ports.statistics import CategoryLookup
from kakeibo.domain.statistics import DEFAULT_CATEGORY_CATALOG, CategoryCatalog
from kakeibo.infrastructure.persistence.sqlalchemy.adapters.statistics import (
    SqlAlchemyAggregateQueryAdapter,
)
from kakeibo_config import Settings, get_settings


class SQLAlchemyStatisticsFactory:
    """SQLAlchemy implementation of the StatisticsPortFactory Protocol."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        catalog: CategoryCatalog = DEFAULT_CATEGORY_CATALOG,
        settings: Settings | None = None,
    ):
        self._session_factory = session_factory
        self._catalog = catalog
        self._settings = settings

        # Cached instance (created on demand)
        self._aggregate_adapter: SqlAlchemyAggregateQueryAdapter | None = None

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    def aggregate_query_port(self) -> SqlAlchemyAggregateQueryAdapter:
        if self._aggregate_adapter is None:
            self._aggregate_adapter = SqlAlchemyAggregateQueryAdapter(
                self._session_factory,
            )
        return self._aggregate_adapter

    def category_lookup(self) -> CategoryLookup:
        return self._catalog.lookup

    def unknown_category_label(self) -> str:
        settings = self._settings or get_settings()
        return settings.unknown_category_label
