"""Exception hierarchy for the people registry."""

from __future__ import annotations

from typing import Any, Dict, Optional


class PeopleError(Exception):
    """Base registry error with a machine readable code."""

    code: str = "people_error"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.details:
            return f"{base} :: {self.details}"
        return base


class ValidationError(PeopleError):
    """Raised when a required field is missing or blank."""

    code = "validation_error"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class ConflictError(PeopleError):
    """Raised when an email address is already held by another person."""

    code = "conflict"

    def __init__(self, message: str, *, email: str | None = None) -> None:
        super().__init__(message, details={"email": email} if email else None)
        self.email = email


__all__ = ["ConflictError", "PeopleError", "ValidationError"]
