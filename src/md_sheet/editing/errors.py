"""Custom exceptions for table edit operations."""

from typing import Any


class TableEditError(Exception):
    """Base exception for table edit operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        super().__init__(message)
        self.error_details = error_details


class TableIndexError(TableEditError, IndexError):
    """Raised when a table, row or column index is outside the valid range.

    Out-of-range indices are a caller-contract violation; the edit is rejected
    before any snapshot is cloned or pushed.
    """


def check_index(kind: str, index: int, low: int, high: int) -> None:
    """Raise TableIndexError unless low <= index <= high."""
    if low <= index <= high:
        return
    raise TableIndexError(
        f"{kind} index {index} out of range [{low}, {high}]",
        {"kind": kind, "index": index, "valid_range": [low, high]},
    )
