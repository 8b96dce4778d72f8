"""create_library_tables

Revision ID: 3e8d1c2b7a90
Revises:
Create Date: 2026-10-12
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3e8d1c2b7a90"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "library_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.String(length=36), nullable=False),
        sa.Column("item_type", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=500), nullable=False),
        sa.Column("production_year", sa.Integer(), nullable=True),
        sa.Column("community_rating", sa.Float(), nullable=True),
        sa.Column("size", sa.BigInteger(), nullable=True),
        sa.Column("provider_ids_json", sa.Text(), nullable=True),
        sa.Column("is_virtual", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_library_items_item_id"), "library_items", ["item_id"], unique=True)
    op.create_index(op.f("ix_library_items_item_type"), "library_items", ["item_type"], unique=False)

    op.create_table(
        "media_sources",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("path", sa.String(length=1000), nullable=True),
        sa.Column("size", sa.BigInteger(), nullable=True),
        sa.Column("bitrate", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["item_id"], ["library_items.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_media_sources_item_id"), "media_sources", ["item_id"], unique=False)

    op.create_table(
        "media_streams",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("source_id", sa.Integer(), nullable=False),
        sa.Column("stream_index", sa.Integer(), nullable=False),
        sa.Column("stream_type", sa.String(length=20), nullable=False),
        sa.Column("codec", sa.String(length=50), nullable=True),
        sa.Column("bit_rate", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["source_id"], ["media_sources.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_media_streams_source_id"), "media_streams", ["source_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_media_streams_source_id"), table_name="media_streams")
    op.drop_table("media_streams")
    op.drop_index(op.f("ix_media_sources_item_id"), table_name="media_sources")
    op.drop_table("media_sources")
    op.drop_index(op.f("ix_library_items_item_type"), table_name="library_items")
    op.drop_index(op.f("ix_library_items_item_id"), table_name="library_items")
    op.drop_table("library_items")
