"""SQLAlchemy table definitions for the authentication gate.

Schema management is external; these definitions mirror the deployed schema
and are used for query construction only.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),  # bcrypt digest
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# ============================================================================
# INVITATION CODES TABLE
# ============================================================================
invitation_codes_table = Table(
    "invitation_codes",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("code", String(255), nullable=False, unique=True),  # URL-safe base64
    Column("email", String(320), nullable=False),  # Only this address may redeem
    Column("used", Boolean, nullable=False, server_default=text("false")),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
)

# Sweeper query: unused codes by expiry
Index(
    "idx_invitation_codes_unused_expires_at",
    invitation_codes_table.c.expires_at,
    postgresql_where=invitation_codes_table.c.used.is_(False),
)

# ============================================================================
# SESSIONS TABLE
# ============================================================================
sessions_table = Table(
    "sessions",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("token", Text, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_sessions_user_id", sessions_table.c.user_id)
