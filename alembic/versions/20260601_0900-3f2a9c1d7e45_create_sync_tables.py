"""create_sync_tables

Revision ID: 3f2a9c1d7e45
Revises:
Create Date: 2026-06-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e45"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create ledger_credentials, report_cache_entries and sync_audit_logs."""
    op.create_table(
        "ledger_credentials",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "environment",
            sa.String(length=20),
            nullable=False,
            comment="Remote environment (sandbox, production)",
        ),
        sa.Column(
            "account_id",
            sa.String(length=64),
            nullable=False,
            comment="Remote company (realm) identifier",
        ),
        sa.Column("access_token", sa.Text(), nullable=False),
        sa.Column("refresh_token", sa.Text(), nullable=False),
        sa.Column(
            "expires_at",
            sa.BigInteger(),
            nullable=False,
            comment="Access token expiry, seconds since epoch",
        ),
        sa.Column(
            "version",
            sa.Integer(),
            nullable=False,
            comment="Bumped on every token replacement",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_ledger_credentials"),
    )
    op.create_index(
        "ix_ledger_credentials_environment",
        "ledger_credentials",
        ["environment"],
        unique=True,
    )

    op.create_table(
        "report_cache_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "period",
            sa.Integer(),
            nullable=False,
            comment="Calendar year the reports cover",
        ),
        sa.Column("last_sync_timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("daily_report", sa.JSON(), nullable=False),
        sa.Column("class_report", sa.JSON(), nullable=False),
        sa.Column("balance_sheet_report", sa.JSON(), nullable=False),
        sa.Column("tracked_accounts", sa.JSON(), nullable=True),
        sa.Column("auxiliary_ledger_data", sa.JSON(), nullable=True),
        sa.Column(
            "synced_by",
            sa.String(length=255),
            nullable=True,
            comment="User who triggered the sync (NULL for scheduled runs)",
        ),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_report_cache_entries"),
    )
    op.create_index(
        "ix_report_cache_entries_period",
        "report_cache_entries",
        ["period"],
        unique=True,
    )

    op.create_table(
        "sync_audit_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="success, skipped or error",
        ),
        sa.Column("details", sa.JSON(), nullable=False),
        sa.Column("executed_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_sync_audit_logs"),
    )
    op.create_index("ix_sync_audit_logs_status", "sync_audit_logs", ["status"])
    op.create_index("idx_sync_audit_executed_at", "sync_audit_logs", ["executed_at"])


def downgrade() -> None:
    """Drop the sync tables."""
    op.drop_index("idx_sync_audit_executed_at", table_name="sync_audit_logs")
    op.drop_index("ix_sync_audit_logs_status", table_name="sync_audit_logs")
    op.drop_table("sync_audit_logs")
    op.drop_index("ix_report_cache_entries_period", table_name="report_cache_entries")
    op.drop_table("report_cache_entries")
    op.drop_index("ix_ledger_credentials_environment", table_name="ledger_credentials")
    op.drop_table("ledger_credentials")
