"""SQLAlchemy table definitions for TableSplit.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(254), nullable=False, unique=True),  # Normalized
    Column("name", String(100), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# GROUPS TABLE
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

group_members_table = Table(
    "group_members",
    metadata,
    Column("group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("group_id", "user_id"),
)

Index("idx_group_members_user_id", group_members_table.c.user_id)

# Expenses are owned by the expense service; only participation is tracked here
expense_participants_table = Table(
    "expense_participants",
    metadata,
    Column("expense_id", UUID, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("expense_id", "user_id"),
)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(254), nullable=False),  # Normalized
    Column(
        "invited_by", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("group_id", UUID, ForeignKey("groups.id", ondelete="RESTRICT"), nullable=False),
    Column("expense_id", UUID, nullable=True),
    Column("token_fingerprint", String(64), nullable=False, unique=True),
    Column(
        "status",
        Enum(
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
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=True
    ),
    CheckConstraint(
        "(status = 'accepted') = "
        "(accepted_at IS NOT NULL AND accepted_by IS NOT NULL)",
        name="ck_invites_accepted_fields",
    ),
)

Index("idx_invites_group_status", invites_table.c.group_id, invites_table.c.status)
Index("idx_invites_invited_by_created", invites_table.c.invited_by, invites_table.c.created_at)
Index("idx_invites_email_status", invites_table.c.email, invites_table.c.status)

# Sweep lookup
Index(
    "idx_invites_pending_expires_at",
    invites_table.c.expires_at,
    postgresql_where=invites_table.c.status == "pending",
)

# Only one pending invite per (email, group)
Index(
    "idx_invites_unique_pending_email_group",
    invites_table.c.email,
    invites_table.c.group_id,
    unique=True,
    postgresql_where=invites_table.c.status == "pending",
)

# ============================================================================
# INVITE AUDIT LOG TABLE (append-only)
# ============================================================================
invite_audit_log_table = Table(
    "invite_audit_log",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "invite_id", UUID, ForeignKey("invites.id", ondelete="RESTRICT"), nullable=False
    ),
    Column(
        "action",
        Enum(
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
    Column(
        "performed_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("metadata", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_invite_audit_log_invite_created",
    invite_audit_log_table.c.invite_id,
    invite_audit_log_table.c.created_at,
)
