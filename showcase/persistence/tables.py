"""SQLAlchemy table definitions for the project showcase.

These tables are used with SQLAlchemy Core and the row mappers in
``showcase.persistence.mappers``. They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (identity provider ids)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Identity provider user id
    Column("name", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("website", Text, nullable=True),
    Column("github", String(255), nullable=True),
    Column("twitter", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("image", Text, nullable=True),
    Column(
        "author_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("technologies", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("live_url", Text, nullable=True),
    Column("github_url", Text, nullable=True),
    # Denormalized all-time vote counter, only changed by relative updates
    Column("votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("votes >= 0", name="ck_projects_votes_non_negative"),
)

Index("idx_projects_author_id", projects_table.c.author_id)
Index("idx_projects_created_at", projects_table.c.created_at)

# ============================================================================
# VOTES TABLE (one row per user, project and UTC day)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "project_id",
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # UTC calendar date of created_at, written by the application
    Column("vote_day", Date, nullable=False),
    UniqueConstraint(
        "user_id", "project_id", "vote_day", name="uq_votes_user_project_day"
    ),
)

Index(
    "idx_votes_project_created_at",
    votes_table.c.project_id,
    votes_table.c.created_at,
)
Index("idx_votes_user_created_at", votes_table.c.user_id, votes_table.c.created_at)

# ============================================================================
# DAILY WINNERS TABLE (insert-only)
# ============================================================================
daily_winners_table = Table(
    "daily_winners",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "project_id",
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("win_date", TIMESTAMP(timezone=True), nullable=False),  # UTC midnight
    Column("vote_count", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "project_id", "win_date", name="uq_daily_winners_project_win_date"
    ),
)

Index("idx_daily_winners_win_date", daily_winners_table.c.win_date)
