"""SQLAlchemy table definitions for the storefront.

These match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    Index,
    LargeBinary,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=False),  # Stored lower-cased
    # bcrypt hash, or "<provider>:<uid>" for federated-only users
    Column("password_hash", Text, nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("profile_picture", Text, nullable=True),
    Column("phone_number", String(32), nullable=True),
    Column("last_login", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
    UniqueConstraint("email", name="uq_users_email"),
    CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
)

# ============================================================================
# PRODUCTS TABLE
# ============================================================================
products_table = Table(
    "products",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("category", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("name", String(255), nullable=False),
    Column("price", Float, nullable=False),
    Column("image", LargeBinary, nullable=False),
    Column("image_content_type", String(100), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_products_category", products_table.c.category)

# ============================================================================
# SEARCHES TABLE (per-user search history)
# ============================================================================
searches_table = Table(
    "searches",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False),
    Column("term", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", "term", name="uq_searches_email_term"),
)

Index("idx_searches_email_updated", searches_table.c.email, searches_table.c.updated_at)
