"""
Noteful Backend — Tag SQLAlchemy Model
=======================================

What:  ORM model representing the `tags` table.
Who:   Used by TagRepository and loaded into Note.tags for populated responses.

Table Design:
    - name: unique across all tags
    - normalized: lowercase form of name, the sort key for tag listings so
      that "apple", "Banana" and "cherry" sort alphabetically regardless of case
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.mixins import EntityMixin


def normalize_tag_name(name: str) -> str:
    return name.strip().lower()


class Tag(EntityMixin, Base):
    """A label that can be attached to any number of notes."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    normalized: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index("idx_tags_normalized", "normalized"),
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}')>"
