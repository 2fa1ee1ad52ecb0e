# Models package init
"""
Noteful Backend — ORM Models
=============================

Importing this package registers every table on `Base.metadata`, which is
what Alembic, the seed script and the test fixtures rely on.
"""

from noteful.models.folder import Folder
from noteful.models.note import Note, note_tags
from noteful.models.tag import Tag

__all__ = ["Folder", "Note", "Tag", "note_tags"]
