"""SQLAlchemy table definitions for Pulse.

Domain models are mapped manually (see ``mappers``), so these are plain Core
tables. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the external identity service, read-only here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("mobile", String(32), nullable=True),
    Column("role", String(20), nullable=False, server_default="USER"),
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_mobile", users_table.c.mobile)

# ============================================================================
# CATEGORIES TABLE (two-level tree per domain)
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("domain", String(20), nullable=False, server_default="POLL"),
    Column("is_parent", Boolean, nullable=False, server_default="false"),
    Column(
        "parent_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("status", String(20), nullable=False, server_default="ACTIVE"),
    # Child overrides, NULL means inherit
    Column("claimable", String(10), nullable=True),
    Column("request_allowed", String(10), nullable=True),
    Column("admin_curated", String(10), nullable=True),
    # Parent defaults
    Column("claimable_default", String(10), nullable=False, server_default="NO"),
    Column("request_allowed_default", String(10), nullable=False, server_default="NO"),
    Column("admin_curated_default", String(10), nullable=False, server_default="NO"),
    Column("display_order", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "NOT (is_parent AND parent_id IS NOT NULL)", name="parent_has_no_parent"
    ),
)

Index("idx_categories_parent_id", categories_table.c.parent_id)
Index("idx_categories_domain", categories_table.c.domain)

# ============================================================================
# POLL CONFIGS TABLE (templates)
# ============================================================================
poll_configs_table = Table(
    "poll_configs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("slug", String(120), nullable=False, unique=True),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="DRAFT"),
    Column("version", Integer, nullable=False, server_default="1"),
    Column("ui_template", String(30), nullable=False),
    Column("theme", JSONB, nullable=False),
    Column("rules", JSONB, nullable=False, server_default="{}"),
    Column("permissions", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_poll_configs_category_id", poll_configs_table.c.category_id)

# ============================================================================
# POLLS TABLE (admin-curated)
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "poll_config_id",
        UUID,
        ForeignKey("poll_configs.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="DRAFT"),
    Column("start_at", TIMESTAMP(timezone=True), nullable=True),
    Column("end_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_polls_status", polls_table.c.status)

poll_invites_table = Table(
    "poll_invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("token", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_poll_invites_poll_id", poll_invites_table.c.poll_id)

# ============================================================================
# VOTES TABLE (admin polls)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column(
        "poll_config_id",
        UUID,
        ForeignKey("poll_configs.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column(
        "invite_id",
        UUID,
        ForeignKey("poll_invites.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("response", JSONB, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("poll_id", "user_id", name="unique_vote_per_user"),
    UniqueConstraint("poll_id", "invite_id", name="unique_vote_per_invite"),
    CheckConstraint(
        "(user_id IS NOT NULL OR invite_id IS NOT NULL)",
        name="user_or_invite_required",
    ),
)

Index("idx_votes_poll_id", votes_table.c.poll_id)

# ============================================================================
# USER POLLS TABLE
# ============================================================================
user_polls_table = Table(
    "user_polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "creator_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("source_info", Text, nullable=True),
    Column("type", String(30), nullable=False),
    Column("status", String(20), nullable=False),
    Column("is_invite_only", Boolean, nullable=False, server_default="true"),
    Column("start_at", TIMESTAMP(timezone=True), nullable=True),
    Column("end_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_polls_creator_id", user_polls_table.c.creator_id)

user_poll_options_table = Table(
    "user_poll_options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "poll_id", UUID, ForeignKey("user_polls.id", ondelete="CASCADE"), nullable=False
    ),
    Column("label", String(300), nullable=False),
    Column("display_order", Integer, nullable=False),
)

Index("idx_user_poll_options_poll_id", user_poll_options_table.c.poll_id)

# ============================================================================
# USER POLL INVITES TABLE
# ============================================================================
user_poll_invites_table = Table(
    "user_poll_invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "poll_id", UUID, ForeignKey("user_polls.id", ondelete="CASCADE"), nullable=False
    ),
    Column("mobile", String(64), nullable=False),  # Normalised, or user:<id>
    Column("token", String(255), nullable=False, unique=True),
    Column("status", String(20), nullable=False, server_default="PENDING"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Partial unique index: one live (non-rejected) invite per poll and mobile
Index(
    "idx_user_poll_invites_unique_live_mobile",
    user_poll_invites_table.c.poll_id,
    user_poll_invites_table.c.mobile,
    unique=True,
    postgresql_where=user_poll_invites_table.c.status != "REJECTED",
)

invite_groups_table = Table(
    "invite_groups",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(200), nullable=False),
    Column("members", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_invite_groups_owner_id", invite_groups_table.c.owner_id)

# ============================================================================
# PROFILES TABLES
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="ACTIVE"),
    Column("is_claimed", Boolean, nullable=False, server_default="false"),
    Column(
        "claimed_by_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("category_id", "name", name="unique_profile_name_per_category"),
)

profile_claims_table = Table(
    "profile_claims",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "profile_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("status", String(20), nullable=False, server_default="PENDING"),
    Column("submitted_data", JSONB, nullable=False, server_default="{}"),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "reviewed_by_admin_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("review_reason", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_profile_claims_profile_status",
    profile_claims_table.c.profile_id,
    profile_claims_table.c.status,
)

profile_requests_table = Table(
    "profile_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("requested_name", String(200), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("status", String(20), nullable=False, server_default="PENDING"),
    Column("submitted_data", JSONB, nullable=False, server_default="{}"),
    Column(
        "approved_profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "reviewed_by_admin_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("review_reason", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PSI VOTES TABLE
# ============================================================================
psi_votes_table = Table(
    "psi_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "profile_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("weight", Float, nullable=False),
    Column("trust_integrity", Float, nullable=False),
    Column("performance_delivery", Float, nullable=False),
    Column("responsiveness", Float, nullable=False),
    Column("leadership_ability", Float, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("profile_id", "user_id", name="unique_psi_vote"),
)

Index("idx_psi_votes_user_id", psi_votes_table.c.user_id)
