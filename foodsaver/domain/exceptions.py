"""Error type shared by the storage and cookbook aggregates."""
from __future__ import annotations

from enum import Enum


class ErrorReason(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    INSUFFICIENT_QUANTITY = "insufficient_quantity"


class InventoryError(ValueError):
    """Invalid argument or state. ``reason`` tells the HTTP layer which status to return."""

    def __init__(self, message: str, reason: ErrorReason = ErrorReason.INVALID_INPUT):
        super().__init__(message)
        self.message = message
        self.reason = reason

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"InventoryError({self.message!r}, reason={self.reason.value})"
