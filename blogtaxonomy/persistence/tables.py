"""SQLAlchemy table definitions for blog taxonomy.

The schema is owned and migrated by the host blog; these definitions only
describe the columns this service reads.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(255), nullable=False, unique=True),
    Column("title", String(255), nullable=False),
    Column("published", Boolean, nullable=False, server_default="false"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_published_at", posts_table.c.published_at)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
)

# ============================================================================
# POST_TAGS TABLE (junction table, also the relevance join target)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
)

Index("idx_post_tags_post_id", post_tags_table.c.post_id)
Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
)

# ============================================================================
# POST_CATEGORIES TABLE (junction table)
# ============================================================================
post_categories_table = Table(
    "post_categories",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("post_id", "category_id", name="uq_post_category"),
)

Index("idx_post_categories_post_id", post_categories_table.c.post_id)
Index("idx_post_categories_category_id", post_categories_table.c.category_id)
