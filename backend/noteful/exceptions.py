"""
Noteful Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for every error the API can return.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) translate them
       into JSON error responses; services never deal in status codes.
Who:   Raised by services and repositories; caught by the global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── InvalidIdentifierError   → 400 Bad Request (malformed id)
    ├── ValidationError          → 400 Bad Request (missing required field)
    ├── DuplicateKeyError        → 400 Bad Request (unique name/title taken)
    ├── NotFoundError            → 404 Not Found (generic fall-through body)
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidIdentifierError(NotefulError):
    """
    Raised when an id in the path, query or body is not a well-formed identifier.

    HTTP: 400 Bad Request

    The check is purely syntactic; the store is never consulted, so a
    malformed id never reaches a query.
    """

    def __init__(
        self,
        field: str = "id",
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["field"] = field
        super().__init__(message=message or f"The `{field}` is not valid", context=ctx)
        self.field = field


class ValidationError(NotefulError):
    """
    Raised when a required request body field is missing or empty.

    HTTP: 400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Missing `name` in request body",
            "details": {"field": "name"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    @classmethod
    def missing(cls, field: str) -> "ValidationError":
        return cls(message=f"Missing `{field}` in request body", field=field)


class DuplicateKeyError(NotefulError):
    """
    Raised when an insert or update violates a unique constraint.

    HTTP: 400 Bad Request

    Repositories raise it with a generic message when the database reports an
    integrity violation; services re-raise it with the entity-specific
    message ("That folder already exists", ...).
    """

    def __init__(
        self,
        message: str = "That value already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NotefulError):
    """
    Raised when no entity matches a well-formed id.

    HTTP: 404 Not Found

    The handler answers with exactly the body used for unmatched routes, so a
    missing entity is indistinguishable from a missing endpoint.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not Found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NotefulError):
    """
    Raised when database operations fail unexpectedly.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic; the original
    error type travels in `context` and is only logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
