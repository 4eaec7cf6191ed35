"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.storage.sqlite.migrations.migrator import initialize_database


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> AsyncGenerator[Path, None]:
    """Temporary database with the real migrations applied."""
    results = await initialize_database(db_path=temp_db_path, create_backup_before=False)
    assert all(r.success for r in results)
    yield temp_db_path


@pytest.fixture
async def db(initialized_db: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """
    Route the global connection pool to the migrated temp database.

    Closes the pool afterwards so each test gets fresh connections.
    """
    import src.infrastructure.storage.sqlite.connection as conn_module

    conn_module._pool = None
    mock_settings.storage.db_path = initialized_db

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield initialized_db
        finally:
            await conn_module.close_pool()
            conn_module._pool = None
