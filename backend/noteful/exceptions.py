"""
Noteful Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and client-safe messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": {"message": ...}}` bodies with the right status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    NotefulError (base)          → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  Client-facing error description (safe to return in API response)
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


class ValidationError(NotefulError):
    """
    Raised when a request body fails the presence/shape rules.

    When:    A create body is missing a required key, or an update body carries
             no usable value.
    HTTP:    400 Bad Request

    Example response:
        {"error": {"message": "required field missing"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = list(fields)
        super().__init__(message=message, context=ctx)
        self.fields = fields or []


class NotFoundError(NotefulError):
    """
    Raised when a requested row does not exist.

    When:    GET or DELETE on an id with no matching row.
    HTTP:    404 Not Found

    SQLAlchemy returns None (or a zero rowcount) for missing records; the
    service layer turns that into this exception so routes stay free of
    branching on query results.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} does not exist", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NotefulError):
    """
    Raised when a database operation fails unexpectedly.

    When:    Connection lost mid-query, constraint violation (e.g. a note
             pointing at a folder that does not exist), etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the underlying
    error type and the operation are kept in `context` for the logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
