"""SQLAlchemy table definitions for algonote.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# MEMBERS TABLE
# ============================================================================
members_table = Table(
    "members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("picture", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROBLEMS TABLE
# ============================================================================
problems_table = Table(
    "problems",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),  # Embedded Content value object
    Column("site", String(100), nullable=True),
    Column("url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_problems_member_id", problems_table.c.member_id)
Index("idx_problems_created_at", problems_table.c.created_at.desc())

# ============================================================================
# PROBLEM_TAGS TABLE (junction table)
# ============================================================================
problem_tags_table = Table(
    "problem_tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    # Insertion order, so tags render in the order they were written
    Column("seq", BigInteger, Identity(), nullable=False),
    Column(
        "problem_id", UUID, ForeignKey("problems.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("problem_id", "tag_id", name="uq_problem_tag"),
)

Index("idx_problem_tags_problem_id", problem_tags_table.c.problem_id)
Index("idx_problem_tags_tag_id", problem_tags_table.c.tag_id)

# ============================================================================
# REVIEWS TABLE
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "problem_id", UUID, ForeignKey("problems.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reviews_member_id", reviews_table.c.member_id)
Index("idx_reviews_problem_id", reviews_table.c.problem_id)

# ============================================================================
# REVIEW_TAGS TABLE (junction table)
# ============================================================================
review_tags_table = Table(
    "review_tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("seq", BigInteger, Identity(), nullable=False),
    Column(
        "review_id", UUID, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("review_id", "tag_id", name="uq_review_tag"),
)

Index("idx_review_tags_review_id", review_tags_table.c.review_id)
Index("idx_review_tags_tag_id", review_tags_table.c.tag_id)
