"""create_users_and_messages

Revision ID: 3c1f9a7d2b40
Revises:
Create Date: 2026-10-18 10:00:00.000000

Creates the users and messages tables.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and messages."""

    # ── users ─────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("username", sa.String(length=255), primary_key=True),
        sa.Column(
            "password",
            sa.Text(),
            nullable=False,
            comment="bcrypt digest, never the plaintext",
        ),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column(
            "join_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )

    # ── messages ──────────────────────────────────────────────────────
    op.create_table(
        "messages",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "from_username",
            sa.String(length=255),
            sa.ForeignKey("users.username"),
            nullable=False,
        ),
        sa.Column(
            "to_username",
            sa.String(length=255),
            sa.ForeignKey("users.username"),
            nullable=False,
        ),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "sent_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_messages_from_username", "messages", ["from_username"])
    op.create_index("ix_messages_to_username", "messages", ["to_username"])


def downgrade() -> None:
    """Drop messages and users."""
    op.drop_index("ix_messages_to_username", table_name="messages")
    op.drop_index("ix_messages_from_username", table_name="messages")
    op.drop_table("messages")
    op.drop_table("users")
