"""
Bookstore API - Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions raised by services and the mapper.
How:   Each exception carries a message and an optional context dict.
       Global handlers registered in main.py turn them into HTTP responses.

Exception Hierarchy:
    BookstoreError (base)
    ├── BadRequestError       → 400 Bad Request (no body)
    ├── NotFoundError         → 404 Not Found (no body)
    ├── InternalServerError   → 500 Internal Server Error (generic text)
    └── MappingError          → no converter registered; surfaces as 500

The 500 response never includes the message or context. Both are written
to the server log only.
"""

from typing import Any, Dict, Optional

GENERIC_ERROR_MESSAGE = "Something went wrong. Please contact the administrator."


class BookstoreError(Exception):
    """
    Base exception for all Bookstore application errors.

    Attributes:
        message:  Human-readable description (logged)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(BookstoreError):
    """
    The request cannot be processed as sent.

    When:    Missing body, id below 1, path id and body id disagree.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Bad request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BookstoreError):
    """
    The referenced record does not exist.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class InternalServerError(BookstoreError):
    """
    A request failed for a reason the client cannot fix.

    When:    The repository reported a failed write, or an unexpected
             exception was caught by the failure boundary.
    HTTP:    500 Internal Server Error with GENERIC_ERROR_MESSAGE
    """

    def __init__(
        self,
        message: str = GENERIC_ERROR_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MappingError(BookstoreError):
    """Raised by the mapper when no converter exists for a source/target pair."""

    def __init__(self, source: type, target: type):
        super().__init__(
            message=f"No mapping registered from {source.__name__} to {target.__name__}",
            context={"source": source.__name__, "target": target.__name__},
        )
        self.source = source
        self.target = target
