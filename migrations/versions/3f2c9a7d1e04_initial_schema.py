"""initial_schema

Create the schema for TableSplit invitations:
- Users and groups (read by the invite flow, written by signup and group services)
- Group members and expense participants (written on invite acceptance)
- Invites (one pending invite per email and group, fingerprint-only storage)
- Invite audit log (append-only lifecycle events)

Revision ID: 3f2c9a7d1e04
Revises:
Create Date: 2026-10-16 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a7d1e04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE invite_status AS ENUM ('pending', 'accepted', 'expired', 'cancelled');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE invite_audit_action AS ENUM (
                'created', 'sent', 'resent', 'accepted', 'expired', 'cancelled'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # GROUPS
    # ========================================================================
    op.create_table(
        "groups",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "group_members",
        sa.Column("group_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("group_id", "user_id"),
    )
    op.create_index("idx_group_members_user_id", "group_members", ["user_id"])

    op.create_table(
        "expense_participants",
        sa.Column("expense_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("expense_id", "user_id"),
    )

    # ========================================================================
    # INVITES
    # ========================================================================
    op.create_table(
        "invites",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("group_id", sa.UUID(), nullable=False),
        sa.Column("expense_id", sa.UUID(), nullable=True),
        sa.Column("token_fingerprint", sa.String(64), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "expired",
                "cancelled",
                name="invite_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("accepted_by", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["invited_by"], ["users.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["accepted_by"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token_fingerprint", name="uq_invites_token_fingerprint"),
        sa.CheckConstraint(
            "(status = 'accepted') = "
            "(accepted_at IS NOT NULL AND accepted_by IS NOT NULL)",
            name="ck_invites_accepted_fields",
        ),
    )

    op.create_index("idx_invites_group_status", "invites", ["group_id", "status"])
    op.create_index(
        "idx_invites_invited_by_created", "invites", ["invited_by", "created_at"]
    )
    op.create_index("idx_invites_email_status", "invites", ["email", "status"])

    # Sweep lookup
    op.execute("""
        CREATE INDEX idx_invites_pending_expires_at
        ON invites (expires_at)
        WHERE status = 'pending'
    """)

    # Partial unique constraint: only one pending invite per (email, group)
    op.execute("""
        CREATE UNIQUE INDEX idx_invites_unique_pending_email_group
        ON invites (email, group_id)
        WHERE status = 'pending'
    """)

    # ========================================================================
    # INVITE AUDIT LOG
    # ========================================================================
    op.create_table(
        "invite_audit_log",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("invite_id", sa.UUID(), nullable=False),
        sa.Column(
            "action",
            postgresql.ENUM(
                "created",
                "sent",
                "resent",
                "accepted",
                "expired",
                "cancelled",
                name="invite_audit_action",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("performed_by", sa.UUID(), nullable=True),
        sa.Column(
            "metadata",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["invite_id"], ["invites.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["performed_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_invite_audit_log_invite_created",
        "invite_audit_log",
        ["invite_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("invite_audit_log")
    op.drop_table("invites")
    op.drop_table("expense_participants")
    op.drop_table("group_members")
    op.drop_table("groups")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS invite_audit_action")
    op.execute("DROP TYPE IF EXISTS invite_status")
