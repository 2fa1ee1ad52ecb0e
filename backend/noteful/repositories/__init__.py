# Repositories package init
"""
Noteful Backend — Store Interface
==================================

What:  The only layer that issues SQL. Each repository wraps one AsyncSession
       and exposes insert / get_by_id / find / update_by_id / delete_by_id.
How:   Store failures are reclassified at this boundary: unique-constraint
       violations become DuplicateKeyError, any other SQLAlchemy error becomes
       DatabaseError. Nothing here retries.

Repository Inventory:
    - FolderRepository
    - TagRepository
    - NoteRepository  (+ clear_folder_reference / remove_tag_reference cascades)
"""

from noteful.repositories.folder_repository import FolderRepository
from noteful.repositories.note_repository import NoteRepository
from noteful.repositories.tag_repository import TagRepository

__all__ = ["FolderRepository", "NoteRepository", "TagRepository"]
