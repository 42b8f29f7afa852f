"""
COVID-19 India API — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the storage layer.
Why:   Raw SQLAlchemy/aiosqlite errors would leak statement text and schema
       details to clients. Services translate them into these types and the
       global handlers registered in main.py turn them into generic responses.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by the storage handle and the services.

Exception Hierarchy:
    Covid19ApiError (base)
    ├── DatabaseError            → 500 Internal Server Error
    └── StorageUnavailableError  → fatal at startup (process exits)

Not-found lookups are deliberately absent: a missing state or district is
answered with an empty object, not an error.
"""

from typing import Any, Dict, Optional


class Covid19ApiError(Exception):
    """
    Base exception for all application errors.

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


class DatabaseError(Covid19ApiError):
    """
    Raised when a statement fails to execute.

    When:    Malformed statement, constraint violation, type mismatch,
             locked database, lost connection.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The failing
    operation and driver error are kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageUnavailableError(Covid19ApiError):
    """
    Raised when the store cannot be opened at startup.

    What:    The SQLite file is missing, unreadable or not a database.
    When:    During Storage.open(), before the server accepts connections.
    Effect:  Startup aborts and the process exits with a non-zero status.
             There is no retry.
    """

    def __init__(
        self,
        message: str = "Could not open the case data store",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
