"""initial_schema

Create the schema for the project showcase:
- Users (project authors, ids from the identity provider)
- Categories (seeded)
- Projects (with the denormalized all-time vote counter)
- Votes (one per user, project and UTC day)
- Daily winners (insert-only, one per project and judged day)

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("github", sa.String(255), nullable=True),
        sa.Column("twitter", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    # ========================================================================
    # PROJECTS table
    # ========================================================================
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column(
            "technologies",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("live_url", sa.Text(), nullable=True),
        sa.Column("github_url", sa.Text(), nullable=True),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("votes >= 0", name="ck_projects_votes_non_negative"),
    )
    op.create_index("idx_projects_author_id", "projects", ["author_id"])
    op.create_index("idx_projects_created_at", "projects", ["created_at"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("vote_day", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "project_id", "vote_day", name="uq_votes_user_project_day"
        ),
    )
    op.create_index(
        "idx_votes_project_created_at", "votes", ["project_id", "created_at"]
    )
    op.create_index("idx_votes_user_created_at", "votes", ["user_id", "created_at"])

    # ========================================================================
    # DAILY_WINNERS table
    # ========================================================================
    op.create_table(
        "daily_winners",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("win_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("vote_count", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "project_id", "win_date", name="uq_daily_winners_project_win_date"
        ),
    )
    op.create_index("idx_daily_winners_win_date", "daily_winners", ["win_date"])

    # ========================================================================
    # TRIGGERS for updated_at
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_users_updated_at
        BEFORE UPDATE ON users
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    # Vote counter changes do not count as project edits
    op.execute("""
        CREATE TRIGGER update_projects_updated_at
        BEFORE UPDATE OF title, description, image, technologies, category_id,
            live_url, github_url ON projects
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    # ========================================================================
    # SEED CATEGORIES
    # ========================================================================
    categories_data = [
        ("Lovable", "lovable", "Projects that make you fall in love with them"),
        ("Cursor", "cursor", "Projects built with Cursor IDE"),
        ("Chef", "chef", "Cooking and recipe related projects"),
        ("Convex", "convex", "Projects using Convex backend"),
        ("Bolt", "bolt", "Fast and efficient projects"),
        ("Replit", "replit", "Projects built on Replit"),
    ]

    categories_table = sa.table(
        "categories",
        sa.column("name", sa.String),
        sa.column("slug", sa.String),
        sa.column("description", sa.Text),
    )

    op.bulk_insert(
        categories_table,
        [
            {"name": name, "slug": slug, "description": description}
            for name, slug, description in categories_data
        ],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute("DROP TRIGGER IF EXISTS update_projects_updated_at ON projects")
    op.execute("DROP TRIGGER IF EXISTS update_users_updated_at ON users")

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("daily_winners")
    op.drop_table("votes")
    op.drop_table("projects")
    op.drop_table("categories")
    op.drop_table("users")
