"""SQLAlchemy table definitions for posts.

Posts are stored as documents: authors, tags and images live inline as JSONB
arrays holding their structural (camelCase) form. The table definition
matches the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    # Store identifier, assigned on insert
    Column("store_id", BigInteger, Identity(always=True), primary_key=True),
    # Application identifier, assigned when the aggregate is built
    Column("id", UUID(as_uuid=True), nullable=False, unique=True),
    Column("title", String(200), nullable=False),
    Column("body", Text, nullable=False),
    Column("authors", JSONB, nullable=False, server_default="[]"),
    Column("tags", JSONB, nullable=False, server_default="[]"),
    Column("images", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_deleted_at", posts_table.c.deleted_at)
Index(
    "idx_posts_authors",
    posts_table.c.authors,
    postgresql_using="gin",
    postgresql_ops={"authors": "jsonb_path_ops"},
)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")
