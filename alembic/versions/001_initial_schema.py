"""Initial schema - access_info and access_permission.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "access_info",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("scope_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("created_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
    )
    op.create_index("ix_access_info_scope_id", "access_info", ["scope_id"])
    op.create_index("ix_access_info_user_id", "access_info", ["user_id"])

    op.create_table(
        "access_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("scope_id", sa.UUID(), nullable=False),
        sa.Column(
            "access_info_id",
            sa.UUID(),
            sa.ForeignKey("access_info.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("domain", sa.String(64), nullable=True),
        sa.Column("action", sa.String(32), nullable=True),
        sa.Column("target_scope_id", sa.UUID(), nullable=True),
        sa.Column("group_id", sa.UUID(), nullable=True),
        sa.Column("created_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
    )
    op.create_index("ix_access_permission_scope_id", "access_permission", ["scope_id"])
    op.create_index(
        "ix_access_permission_access_info_id", "access_permission", ["access_info_id"]
    )
    # A grant is unique per access info; NULL fields are wildcards and compare equal
    op.execute("""
        CREATE UNIQUE INDEX ux_access_permission_grant ON access_permission
        (access_info_id, domain, action, target_scope_id, group_id) NULLS NOT DISTINCT
    """)


def downgrade() -> None:
    op.drop_table("access_permission")
    op.drop_table("access_info")
