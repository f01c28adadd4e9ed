"""Root pytest configuration.

Test Structure:
    tests/
    └── unit/
        ├── domain/          # Value objects, period arithmetic, catalog
        ├── application/     # Derived metrics, aggregator, assembler, queries
        ├── infrastructure/  # In-memory and SQLAlchemy (SQLite) adapters
        └── config/          # Settings and logging setup
"""

import pytest
from dotenv import load_dotenv

from kakeibo_config import clear_settings_cache, get_config_dir

# Load a test env file if one exists (same discovery as local development)
TEST_ENV_FILE = get_config_dir() / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Give every test a freshly loaded Settings instance."""
    clear_settings_cache()
    yield
    clear_settings_cache()
