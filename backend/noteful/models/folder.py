"""
Noteful Backend — Folder SQLAlchemy Model
==========================================

What:  ORM model representing the `folders` table.
Who:   Used by FolderRepository; notes point at folders via `notes.folder_id`.

Table Design:
    - name: unique across all folders, compared case-sensitively
    - no relationship to notes: a note's folder reference is a bare id,
      and deleting a folder clears those ids (see NoteRepository)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.mixins import EntityMixin


class Folder(EntityMixin, Base):
    """A named folder grouping zero or more notes."""

    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
