"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Float,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column("role", String(20), nullable=True),  # 'admin' or NULL
    Column("membership", String(20), nullable=False, server_default="non-member"),
    Column("post_limit", Integer, nullable=False, server_default="5"),
    Column("is_blocked", Boolean, nullable=False, server_default="false"),
    Column("warning", Boolean, nullable=False, server_default="false"),
    Column("badges", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_sign_in", TIMESTAMP(timezone=True), nullable=True),
    Column("last_sign_in_ip", String(64), nullable=True),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("author_email", String(255), nullable=False),
    Column("author_name", String(255), nullable=True),
    Column("author_image", Text, nullable=True),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("tag", String(100), nullable=False),
    Column("up_vote", Integer, nullable=False, server_default="0"),
    Column("down_vote", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_email", posts_table.c.author_email)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# No foreign key to posts: deleting a post leaves its comments in place
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("author_email", String(255), nullable=True),
    Column("author_name", String(255), nullable=True),
    Column("author_image", Text, nullable=True),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("comment_id", UUID(as_uuid=True), nullable=False, unique=True),
    Column("post_id", UUID(as_uuid=True), nullable=True),
    Column("comment_text", Text, nullable=True),
    Column("commenter_email", String(255), nullable=True),
    Column("reporter_email", String(255), nullable=True),
    Column("feedback", Text, nullable=True),
    Column("status", String(20), nullable=True),  # 'resolved' or NULL (open)
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reports_created_at", reports_table.c.created_at.desc())

# ============================================================================
# PAYMENTS TABLE
# ============================================================================
payments_table = Table(
    "payments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False),
    Column("amount", Float, nullable=False),
    Column("transaction_id", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_payments_email", payments_table.c.email)
