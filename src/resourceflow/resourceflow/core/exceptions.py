from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str, details: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.message = message
        self.details = list(details or [])


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when an allocation overlaps another one for the same employee and project."""
