"""create_posts

Create the posts document table:
- store_id: identity primary key assigned on insert
- id: application UUID, unique
- authors/tags/images: JSONB arrays holding the structural (camelCase) form
- deleted_at: soft-delete mark

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:41.522190

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "store_id",
            sa.BigInteger(),
            sa.Identity(always=True),
            nullable=False,
        ),
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "authors",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "tags",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "images",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("store_id"),
        sa.UniqueConstraint("id", name="uq_posts_id"),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_deleted_at", "posts", ["deleted_at"])
    op.create_index(
        "idx_posts_authors",
        "posts",
        ["authors"],
        postgresql_using="gin",
        postgresql_ops={"authors": "jsonb_path_ops"},
    )
    op.create_index("idx_posts_tags", "posts", ["tags"], postgresql_using="gin")


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_tags", table_name="posts")
    op.drop_index("idx_posts_authors", table_name="posts")
    op.drop_index("idx_posts_deleted_at", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
