"""SQLAlchemy table definitions for the blog.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)

# Metadata object for all tables
metadata = MetaData()


# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    # Allocated in increasing order; id DESC is newest first
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    # Owner identity, copied from the authenticated user at creation
    Column("user_id", String(255), nullable=False),
    Column("username", String(255), nullable=False),
    Column(
        "published_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_posts_username", posts_table.c.username)

# ============================================================================
# POST TAGS TABLE (ordered tag labels per post)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("name", Text, nullable=False),
)

Index("idx_post_tags_name", post_tags_table.c.name)
