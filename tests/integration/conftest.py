"""Fixtures for database integration tests.

Each test gets a fresh SQLite file with every table created from the
models, so tests never share rows.
"""

import pytest_asyncio

from ledger_sync.infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'ledger_sync.db'}")
    await db.create_all()
    yield db
    await db.close()
