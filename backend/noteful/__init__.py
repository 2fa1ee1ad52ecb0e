"""
Noteful Backend — Application Package Initializer
==================================================

What: Marks the `noteful` directory as a Python package.
Who:  Imported by uvicorn (noteful.main:app), Alembic, pytest and the seed script.

Architecture Note:
    The backend is layered:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, cascades
    ├─────────────────────────────────────┤
    │     Repositories (Store Interface)  │  ← insert / find / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP to service calls, services own validation and
    cross-entity cleanup, repositories are the only layer issuing SQL.
"""

__version__ = "1.0.0"
