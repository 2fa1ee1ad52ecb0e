# Services package init
"""
Noteful Backend — Services Layer
=================================

What:  Business rules between routes (HTTP) and repositories (store).
How:   Every service method receives the request's AsyncSession, validates
       its inputs before touching the store, and returns response schemas.

Service Inventory:
    - FolderService: folder CRUD; folder delete detaches notes
    - TagService:    tag CRUD; tag delete removes the tag from notes
    - NoteService:   note CRUD and filtered listing with populated tags
"""
