"""
Pytest fixtures for infrastructure persistence tests.

Each test gets its own SQLite database file (aiosqlite driver) under pytest's
tmp_path. A file rather than ``:memory:`` keeps the schema visible to every
pooled connection, which the concurrent aggregate queries need.
"""

from datetime import date
from decimal import Decimal

import pytest_asyncio

from kakeibo.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_factory,
    create_tables,
)
from kakeibo.infrastructure.persistence.sqlalchemy.models import TransactionModel
from kakeibo_config import Settings


def make_transaction(amount, txn_type, day, category_id=None, description=None):
    return TransactionModel(
        amount=Decimal(amount),
        type=txn_type,
        date=day,
        category_id=category_id,
        description=description,
    )


SEED_TRANSACTIONS = [
    # March 2024
    ("30000", "income", date(2024, 3, 1), 101),
    ("20000", "income", date(2024, 3, 31), 102),
    ("8000", "expense", date(2024, 3, 5), 3),
    ("12000", "expense", date(2024, 3, 10), 1),
    ("500", "expense", date(2024, 3, 12), None),
    # February 2024
    ("40000", "income", date(2024, 2, 29), 101),
    ("9000", "expense", date(2024, 2, 1), 3),
    # Outside 2024
    ("99999", "income", date(2023, 12, 31), 101),
]


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'kakeibo.db'}")
    engine = create_engine(settings)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine):
    return create_session_factory(async_engine)


@pytest_asyncio.fixture
async def seeded_session_factory(session_factory):
    """Session factory over a database pre-filled with SEED_TRANSACTIONS."""
    async with session_factory() as session:
        session.add_all(make_transaction(*row) for row in SEED_TRANSACTIONS)
        await session.commit()
    return session_factory
