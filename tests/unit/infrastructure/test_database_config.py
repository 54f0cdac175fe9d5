"""Unit tests for engine creation."""

import pytest
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from core.infrastructure.database import create_engine
from core.infrastructure.database.config import is_memory_database
from core.settings.sections import DatabaseSettings


@pytest.mark.parametrize(
    "url, expected",
    [
        ("sqlite+aiosqlite:///:memory:", True),
        ("sqlite+aiosqlite://", True),
        ("sqlite+aiosqlite:///file:orders?mode=memory&cache=shared&uri=true", True),
        ("sqlite+aiosqlite:///./storefront.db", False),
        ("sqlite+aiosqlite:////var/lib/storefront/orders.db", False),
    ],
)
def test_is_memory_database(url, expected):
    assert is_memory_database(make_url(url)) is expected


def test_memory_sqlite_shares_one_connection():
    engine = create_engine(DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:"))

    assert isinstance(engine.sync_engine.pool, StaticPool)


def test_file_sqlite_pools_connections(tmp_path):
    engine = create_engine(DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}"))

    assert not isinstance(engine.sync_engine.pool, StaticPool)
