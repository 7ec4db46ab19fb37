"""content tables, profiles, settings and instagram mirror

Revision ID: 0001_init
Revises:
Create Date: 2026-10-16
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _json() -> sa.types.TypeEngine:
    return sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("slug", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("facts", _json(), nullable=True),
        sa.Column("hero_image_path", sa.String(length=500), nullable=True),
        sa.Column("project_images", _json(), nullable=False),
        sa.Column("image_pairs", _json(), nullable=False),
        sa.Column("is_hero", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_projects_slug", "projects", ["slug"], unique=True)
    op.create_index("ix_projects_year", "projects", ["year"])
    op.create_index("ix_projects_is_hero", "projects", ["is_hero"])
    op.create_index("ix_projects_is_published", "projects", ["is_published"])

    op.create_table(
        "posts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("slug", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("cover_image_path", sa.String(length=500), nullable=True),
        sa.Column("tags", _json(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_posts_slug", "posts", ["slug"], unique=True)
    op.create_index("ix_posts_is_published", "posts", ["is_published"])

    op.create_table(
        "listings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("slug", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("subtitle", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("facts", _json(), nullable=True),
        sa.Column("location", _json(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="for_sale"),
        sa.Column("hero_image_path", sa.String(length=500), nullable=True),
        sa.Column("hero_video_url", sa.String(length=500), nullable=True),
        sa.Column("brochure_pdf_path", sa.String(length=500), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("status IN ('coming_soon', 'for_sale', 'sold')", name="ck_listings_status"),
    )
    op.create_index("ix_listings_slug", "listings", ["slug"], unique=True)
    op.create_index("ix_listings_status", "listings", ["status"])
    op.create_index("ix_listings_is_published", "listings", ["is_published"])

    op.create_table(
        "enquiries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("context", _json(), nullable=True),
        sa.Column("source", sa.String(length=50), nullable=False, server_default="contact"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_enquiries_created_at", "enquiries", ["created_at"])

    op.create_table(
        "site_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("key_name", sa.String(length=100), nullable=False),
        sa.Column("value", _json(), nullable=True),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_site_settings_key_name", "site_settings", ["key_name"], unique=True)

    op.create_table(
        "profiles",
        sa.Column("user_id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="editor"),
        *_timestamps(),
        sa.CheckConstraint("role IN ('admin', 'editor')", name="ck_profiles_role"),
    )

    op.create_table(
        "instagram_cache",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("media_url", sa.String(length=1000), nullable=False),
        sa.Column("permalink", sa.String(length=500), nullable=True),
        sa.Column("caption", sa.Text(), nullable=False, server_default=""),
        sa.Column("media_type", sa.String(length=20), nullable=False, server_default="IMAGE"),
        sa.Column("timestamp", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("fetched_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("instagram_cache")
    op.drop_table("profiles")
    op.drop_index("ix_site_settings_key_name", table_name="site_settings")
    op.drop_table("site_settings")
    op.drop_index("ix_enquiries_created_at", table_name="enquiries")
    op.drop_table("enquiries")
    for name in ("ix_listings_is_published", "ix_listings_status", "ix_listings_slug"):
        op.drop_index(name, table_name="listings")
    op.drop_table("listings")
    for name in ("ix_posts_is_published", "ix_posts_slug"):
        op.drop_index(name, table_name="posts")
    op.drop_table("posts")
    for name in ("ix_projects_is_published", "ix_projects_is_hero", "ix_projects_year", "ix_projects_slug"):
        op.drop_index(name, table_name="projects")
    op.drop_table("projects")
