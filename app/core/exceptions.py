"""
Error taxonomy for the MCQ core.

The HTTP layer maps these to status codes in app.main.
"""
from typing import List, Optional


class MCQBankError(Exception):
    """Base class for all errors raised by the core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MCQBankError):
    """Malformed input or a violated invariant. User-correctable."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class NotFoundError(MCQBankError):
    """Referenced entity does not exist."""


class ForbiddenError(MCQBankError):
    """Acting identity does not own the entity."""


class StorageError(MCQBankError):
    """Underlying store failure. Details are logged, never returned to callers."""
