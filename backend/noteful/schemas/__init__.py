# Schemas package init
"""
Noteful Backend — Pydantic Request/Response Schemas
====================================================

What:  The API contract. Responses are serialized in camelCase
       (`createdAt`, `folderId`) through a shared alias generator, while
       Python code keeps snake_case attribute names.
"""
