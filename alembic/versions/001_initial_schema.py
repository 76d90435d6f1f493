"""Initial schema - users, agencies, members, roles, overrides.

Revision ID: 001
Revises:
Create Date: 2025-11-26

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("email", sa.String(320), nullable=True),
    )
    op.create_index("ix_app_user_email", "app_user", [sa.text("lower(email)")], unique=True)

    op.create_table(
        "agency",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "agency_member",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("agency_id", sa.UUID(), sa.ForeignKey("agency.id", ondelete="CASCADE"), nullable=False),
        sa.Column("member_type", sa.String(20), nullable=False, server_default="seated_user"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "member_type IN ('owner', 'admin', 'seated_user')",
            name="ck_agency_member_member_type",
        ),
    )
    op.create_index(
        "ix_agency_member_user_agency", "agency_member", ["user_id", "agency_id"], unique=True
    )

    op.create_table(
        "agency_role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("agency_id", sa.UUID(), sa.ForeignKey("agency.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("color", sa.String(7), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("permissions", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("section_access", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_agency_role_agency_name", "agency_role", ["agency_id", "name"], unique=True)

    op.create_table(
        "member_role",
        sa.Column("member_id", sa.UUID(), sa.ForeignKey("agency_member.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("agency_role.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "member_permission_override",
        sa.Column("member_id", sa.UUID(), sa.ForeignKey("agency_member.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("permission_key", sa.String(100), primary_key=True),
        sa.Column("value", sa.Boolean(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("member_permission_override")
    op.drop_table("member_role")
    op.drop_table("agency_role")
    op.drop_index("ix_agency_member_user_agency", table_name="agency_member")
    op.drop_table("agency_member")
    op.drop_table("agency")
    op.drop_index("ix_app_user_email", table_name="app_user")
    op.drop_table("app_user")
