"""initial_schema

Create the algonote schema:
- Members (registered elsewhere, read by the core)
- Tags (shared, unique by name)
- Problems and their problem_tags join rows
- Reviews and their review_tags join rows

Revision ID: 3c9d1e7a5b20
Revises:
Create Date: 2025-11-02 10:14:08.512930

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9d1e7a5b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # MEMBERS table
    # ========================================================================
    op.create_table(
        "members",
        _id_column(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("picture", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_members_email"),
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        # Concurrent creation of the same name must fail here
        sa.UniqueConstraint("name", name="uq_tags_name"),
    )

    # ========================================================================
    # PROBLEMS table
    # ========================================================================
    op.create_table(
        "problems",
        _id_column(),
        sa.Column("member_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("site", sa.String(100), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(trim(content)) > 0", name="content_not_blank"),
    )
    op.create_index("idx_problems_member_id", "problems", ["member_id"])
    op.create_index(
        "idx_problems_created_at", "problems", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # PROBLEM_TAGS table (junction)
    # ========================================================================
    op.create_table(
        "problem_tags",
        _id_column(),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("problem_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["problem_id"], ["problems.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("problem_id", "tag_id", name="uq_problem_tag"),
    )
    op.create_index("idx_problem_tags_problem_id", "problem_tags", ["problem_id"])
    op.create_index("idx_problem_tags_tag_id", "problem_tags", ["tag_id"])

    # ========================================================================
    # REVIEWS table
    # ========================================================================
    op.create_table(
        "reviews",
        _id_column(),
        sa.Column("member_id", sa.UUID(), nullable=False),
        sa.Column("problem_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["problem_id"], ["problems.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "length(trim(content)) > 0", name="review_content_not_blank"
        ),
    )
    op.create_index("idx_reviews_member_id", "reviews", ["member_id"])
    op.create_index("idx_reviews_problem_id", "reviews", ["problem_id"])

    # ========================================================================
    # REVIEW_TAGS table (junction)
    # ========================================================================
    op.create_table(
        "review_tags",
        _id_column(),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("review_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["review_id"], ["reviews.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("review_id", "tag_id", name="uq_review_tag"),
    )
    op.create_index("idx_review_tags_review_id", "review_tags", ["review_id"])
    op.create_index("idx_review_tags_tag_id", "review_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("review_tags")
    op.drop_table("reviews")
    op.drop_table("problem_tags")
    op.drop_table("problems")
    op.drop_table("tags")
    op.drop_table("members")
