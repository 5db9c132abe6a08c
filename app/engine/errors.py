"""
Domain errors raised by the scoring engine.

Routes never catch these: exception handlers registered in app.main turn
them into JSON responses (400 / 404 / 500).
"""
from typing import Any, Dict, Optional


class GameError(Exception):
    """Base class; carries a user-facing message plus optional context."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.__class__.__name__}] {self.message}{details_str}"


class ValidationError(GameError):
    """Malformed or out-of-range input. Nothing was written."""

    status_code = 400


class NotFoundError(GameError):
    """Missing row, foreign row, or a row in the wrong state for the transition."""

    status_code = 404


class StorageError(GameError):
    """Backing store failure; the request's transaction was rolled back."""

    status_code = 500
