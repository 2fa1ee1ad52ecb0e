"""
Noteful Backend — Note SQLAlchemy Model
========================================

What:  ORM model representing the `notes` table and the `note_tags` link table.
Who:   Used by NoteRepository for CRUD, filtering and cascade cleanup.

Table Design:
    - title: unique across all notes
    - content: optional free text
    - folder_id: optional bare reference to a folder. No foreign key: ids are
      validated for format only, and folder deletion clears them explicitly.
    - note_tags: one row per (note, tag) pair. tag_id has no foreign key for
      the same reason; note_id rows are removed together with their note.

    Index on updated_at: listings are always ordered by updated_at DESC.
"""

import uuid
from typing import List, Optional

from sqlalchemy import Column, ForeignKey, Index, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, foreign, mapped_column, relationship

from noteful.database import Base
from noteful.models.mixins import EntityMixin
from noteful.models.tag import Tag


note_tags = Table(
    "note_tags",
    Base.metadata,
    Column(
        "note_id",
        Uuid(as_uuid=True),
        ForeignKey("notes.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Uuid(as_uuid=True), primary_key=True),
    Index("idx_note_tags_tag_id", "tag_id"),
)


class Note(EntityMixin, Base):
    """
    A note, optionally filed in one folder and labelled with any number of tags.

    `tags` is a read-only view populated from note_tags joined to tags;
    writes go through NoteRepository.replace_tags(). Links to tags that no
    longer exist simply do not appear in the populated list.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    folder_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        index=True,
    )

    tags: Mapped[List[Tag]] = relationship(
        Tag,
        secondary=note_tags,
        primaryjoin=lambda: Note.id == note_tags.c.note_id,
        secondaryjoin=lambda: Tag.id == foreign(note_tags.c.tag_id),
        viewonly=True,
        lazy="selectin",
        order_by=lambda: Tag.normalized,
    )

    __table_args__ = (
        Index("idx_notes_updated_at", "updated_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', folder_id={self.folder_id})>"
