"""initial_schema

Create the foundational schema for Pulse:
- Users (read-only mirror of the identity service)
- Categories (two-level tree with inheritable flags)
- Poll configs, admin polls, poll invites and votes
- User polls with options, invites and invite groups
- Profiles, claims, requests and PSI votes

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str) -> sa.Column:
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
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("mobile", sa.String(32), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="USER"),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_mobile", "users", ["mobile"])

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("domain", sa.String(20), nullable=False, server_default="POLL"),
        sa.Column("is_parent", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
        sa.Column("claimable", sa.String(10), nullable=True),  # NULL = inherit
        sa.Column("request_allowed", sa.String(10), nullable=True),
        sa.Column("admin_curated", sa.String(10), nullable=True),
        sa.Column(
            "claimable_default", sa.String(10), nullable=False, server_default="NO"
        ),
        sa.Column(
            "request_allowed_default",
            sa.String(10),
            nullable=False,
            server_default="NO",
        ),
        sa.Column(
            "admin_curated_default", sa.String(10), nullable=False, server_default="NO"
        ),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["parent_id"], ["categories.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "NOT (is_parent AND parent_id IS NOT NULL)", name="parent_has_no_parent"
        ),
    )
    op.create_index("idx_categories_parent_id", "categories", ["parent_id"])
    op.create_index("idx_categories_domain", "categories", ["domain"])

    # ========================================================================
    # POLL_CONFIGS table
    # ========================================================================
    op.create_table(
        "poll_configs",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="DRAFT"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("ui_template", sa.String(30), nullable=False),
        sa.Column("theme", postgresql.JSONB(), nullable=False),
        sa.Column(
            "rules", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'")
        ),
        sa.Column(
            "permissions",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_poll_config_slug"),
    )
    op.create_index("idx_poll_configs_category_id", "poll_configs", ["category_id"])

    # ========================================================================
    # POLLS and POLL_INVITES tables
    # ========================================================================
    op.create_table(
        "polls",
        _id(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("poll_config_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="DRAFT"),
        sa.Column("start_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("end_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["poll_config_id"], ["poll_configs.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_polls_status", "polls", ["status"])

    op.create_table(
        "poll_invites",
        _id(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("token", sa.String(255), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_poll_invite_token"),
    )
    op.create_index("idx_poll_invites_poll_id", "poll_invites", ["poll_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _id(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("poll_config_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("invite_id", sa.UUID(), nullable=True),
        sa.Column("response", postgresql.JSONB(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["poll_config_id"], ["poll_configs.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["invite_id"], ["poll_invites.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        # Each identity facet votes at most once per poll
        sa.UniqueConstraint("poll_id", "user_id", name="unique_vote_per_user"),
        sa.UniqueConstraint("poll_id", "invite_id", name="unique_vote_per_invite"),
        sa.CheckConstraint(
            "(user_id IS NOT NULL OR invite_id IS NOT NULL)",
            name="user_or_invite_required",
        ),
    )
    op.create_index("idx_votes_poll_id", "votes", ["poll_id"])

    # ========================================================================
    # USER_POLLS and USER_POLL_OPTIONS tables
    # ========================================================================
    op.create_table(
        "user_polls",
        _id(),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("source_info", sa.Text(), nullable=True),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column(
            "is_invite_only", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("start_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("end_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_user_polls_creator_id", "user_polls", ["creator_id"])

    op.create_table(
        "user_poll_options",
        _id(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("label", sa.String(300), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["poll_id"], ["user_polls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_user_poll_options_poll_id", "user_poll_options", ["poll_id"]
    )

    # ========================================================================
    # USER_POLL_INVITES and INVITE_GROUPS tables
    # ========================================================================
    op.create_table(
        "user_poll_invites",
        _id(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("mobile", sa.String(64), nullable=False),  # Normalised, or user:<id>
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("user_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["poll_id"], ["user_polls.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_user_poll_invite_token"),
    )
    op.create_index(
        "idx_user_poll_invites_unique_live_mobile",
        "user_poll_invites",
        ["poll_id", "mobile"],
        unique=True,
        postgresql_where=sa.text("status <> 'REJECTED'"),
    )

    op.create_table(
        "invite_groups",
        _id(),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "members",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'"),
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_invite_groups_owner_id", "invite_groups", ["owner_id"])

    # ========================================================================
    # PROFILES, PROFILE_CLAIMS and PROFILE_REQUESTS tables
    # ========================================================================
    op.create_table(
        "profiles",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
        sa.Column("is_claimed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("claimed_by_user_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["claimed_by_user_id"], ["users.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "category_id", "name", name="unique_profile_name_per_category"
        ),
    )

    op.create_table(
        "profile_claims",
        _id(),
        sa.Column("profile_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column(
            "submitted_data",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("reviewed_by_admin_id", sa.UUID(), nullable=True),
        sa.Column("review_reason", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["reviewed_by_admin_id"], ["users.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_profile_claims_profile_status",
        "profile_claims",
        ["profile_id", "status"],
    )

    op.create_table(
        "profile_requests",
        _id(),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("requested_name", sa.String(200), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column(
            "submitted_data",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("approved_profile_id", sa.UUID(), nullable=True),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("reviewed_by_admin_id", sa.UUID(), nullable=True),
        sa.Column("review_reason", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["approved_profile_id"], ["profiles.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["reviewed_by_admin_id"], ["users.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # PSI_VOTES table
    # ========================================================================
    op.create_table(
        "psi_votes",
        _id(),
        sa.Column("profile_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("trust_integrity", sa.Float(), nullable=False),
        sa.Column("performance_delivery", sa.Float(), nullable=False),
        sa.Column("responsiveness", sa.Float(), nullable=False),
        sa.Column("leadership_ability", sa.Float(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("profile_id", "user_id", name="unique_psi_vote"),
    )
    op.create_index("idx_psi_votes_user_id", "psi_votes", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("psi_votes")
    op.drop_table("profile_requests")
    op.drop_table("profile_claims")
    op.drop_table("profiles")
    op.drop_table("invite_groups")
    op.drop_table("user_poll_invites")
    op.drop_table("user_poll_options")
    op.drop_table("user_polls")
    op.drop_table("votes")
    op.drop_table("poll_invites")
    op.drop_table("polls")
    op.drop_table("poll_configs")
    op.drop_table("categories")
    op.drop_table("users")
