"""Initial schema - role_membership and description.

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
        "role_membership",
        sa.Column("role", sa.String(64), primary_key=True),
        sa.Column("account", sa.LargeBinary(20), primary_key=True),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("granted_by", sa.LargeBinary(20), nullable=True),
    )
    op.create_index("ix_role_membership_account", "role_membership", ["account"])

    # Absence of a row is the zero fingerprint.
    op.create_table(
        "description",
        sa.Column("account", sa.LargeBinary(20), primary_key=True),
        sa.Column("fingerprint", sa.LargeBinary(32), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_by", sa.LargeBinary(20), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("description")
    op.drop_index("ix_role_membership_account", table_name="role_membership")
    op.drop_table("role_membership")
