"""Integration tests for database infrastructure.

Tests session management against a real (SQLite) database:
    - Connection check
    - Commit on successful exit, rollback on exception
"""

from datetime import UTC, datetime

import pytest
from sqlalchemy import select, text

from ledger_sync.infrastructure.persistence.database import Database
from ledger_sync.infrastructure.persistence.models.sync_audit_log import SyncAuditLog


@pytest.mark.integration
class TestDatabaseIntegration:
    async def test_database_connection_works(self, database):
        assert await database.check_connection() is True

    async def test_get_session_executes_query(self, database):
        async with database.get_session() as session:
            result = await session.execute(text("SELECT 1"))
            assert result.scalar() == 1

    async def test_session_commits_on_exit(self, database):
        async with database.get_session() as session:
            session.add(
                SyncAuditLog(
                    status="success",
                    details={"period": 2024},
                    executed_at=datetime(2024, 6, 10, 18, 0, tzinfo=UTC),
                )
            )

        async with database.get_session() as session:
            rows = (await session.execute(select(SyncAuditLog))).scalars().all()
        assert len(rows) == 1

    async def test_session_rolls_back_on_exception(self, database):
        with pytest.raises(RuntimeError):
            async with database.get_session() as session:
                session.add(
                    SyncAuditLog(
                        status="error",
                        details={},
                        executed_at=datetime(2024, 6, 10, 18, 0, tzinfo=UTC),
                    )
                )
                await session.flush()
                raise RuntimeError("abort")

        async with database.get_session() as session:
            rows = (await session.execute(select(SyncAuditLog))).scalars().all()
        assert rows == []

    async def test_unreachable_database(self, tmp_path):
        db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path}/missing/dir/x.db")
        try:
            assert await db.check_connection() is False
        finally:
            await db.close()
