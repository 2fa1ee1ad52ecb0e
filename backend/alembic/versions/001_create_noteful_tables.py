"""Create folders, tags, notes and note_tags tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial schema. See noteful/models/ for the column documentation.

notes.folder_id and note_tags.tag_id deliberately carry no foreign key:
references are format-checked only, and folder/tag deletion clears them.

Rollback: downgrade() drops every table (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns():
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "folders",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "tags",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("normalized", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("idx_tags_normalized", "tags", ["normalized"])

    op.create_table(
        "notes",
        *_entity_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("folder_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title"),
    )
    op.create_index("ix_notes_folder_id", "notes", ["folder_id"])
    op.create_index("idx_notes_updated_at", "notes", ["updated_at"])

    op.create_table(
        "note_tags",
        sa.Column("note_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("tag_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.ForeignKeyConstraint(["note_id"], ["notes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("note_id", "tag_id"),
    )
    op.create_index("idx_note_tags_tag_id", "note_tags", ["tag_id"])


def downgrade() -> None:
    op.drop_index("idx_note_tags_tag_id", table_name="note_tags")
    op.drop_table("note_tags")
    op.drop_index("idx_notes_updated_at", table_name="notes")
    op.drop_index("ix_notes_folder_id", table_name="notes")
    op.drop_table("notes")
    op.drop_index("idx_tags_normalized", table_name="tags")
    op.drop_table("tags")
    op.drop_table("folders")
