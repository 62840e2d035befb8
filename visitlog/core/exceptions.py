"""
Custom Exceptions

This module defines the exceptions raised by the visit logger service.

- ConfigurationError is raised at startup and is fatal: the process must
  not begin listening.
- VisitInsertError / VisitReadError are raised around database calls and
  are turned into HTTP 500 responses at the request boundary.
"""

from typing import Optional


class VisitLoggerException(Exception):
    """Base exception for the visit logger service."""
    pass


class ConfigurationError(VisitLoggerException):
    """Raised when the service configuration is invalid."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DatabaseError(VisitLoggerException):
    """Raised when database operations fail."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")


class VisitInsertError(DatabaseError):
    """Raised when a visit could not be recorded."""

    def __init__(self, original_error: BaseException):
        super().__init__(f"Failed to record visit: {original_error}", original_error)


class VisitReadError(DatabaseError):
    """Raised when recent visits could not be read."""

    def __init__(self, original_error: BaseException):
        super().__init__(f"Failed to read visits: {original_error}", original_error)
