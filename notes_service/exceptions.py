"""
Notes Service - Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for each failure class of a request.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       either a JSON error payload or a flash redirect for form submissions.
Who:   Raised by NoteService; caught by the handlers in main.py.

Exception Hierarchy:
    NotesServiceError (base)
    ├── ValidationError          → 422 Unprocessable Entity / error flash
    ├── NotFoundError            → 404 Not Found
    └── StorageError             → 500 Internal Server Error / error flash
        ├── StorageReadError
        └── StorageWriteError

The store itself never raises: it returns error signals, and NoteService is
the one place that converts them into StorageReadError / StorageWriteError.
"""

from typing import Any, Dict, Optional


class NotesServiceError(Exception):
    """
    Base exception for all notes service errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        context:  Additional debug info (logged, never returned to the client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesServiceError):
    """
    Raised when the submitted note text is missing, blank, or too long.

    HTTP: 422 Unprocessable Entity (JSON clients) or a redirect carrying an
    error flash (form clients). Never reaches the store.
    """

    status_code = 422

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


class NotFoundError(NotesServiceError):
    """Raised when a delete targets a note id that is not stored."""

    status_code = 404

    def __init__(
        self,
        resource_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource_id"] = resource_id
        super().__init__(message=f'Note "{resource_id}" not found.', context=ctx)
        self.resource_id = resource_id


class StorageError(NotesServiceError):
    """
    Raised when the backing file could not be read or written.

    The message is the store's user-facing error string; OS-level details
    stay in the server log.
    """

    status_code = 500


class StorageReadError(StorageError):
    """Backing file unreadable or not a valid note sequence."""


class StorageWriteError(StorageError):
    """Persisting the updated sequence failed; the mutation is discarded."""
