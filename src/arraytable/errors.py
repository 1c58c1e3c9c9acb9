"""Structured error types for arraytable."""

from __future__ import annotations


class ArrayTableError(Exception):
    """Base error for all arraytable errors."""


class InvalidBoundsError(ArrayTableError, ValueError):
    """Raised when an array is created with low > high."""

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Invalid index range [{low}, {high}]: low must not exceed high")


class AllocationError(ArrayTableError, MemoryError):
    """Raised when slot storage for an array or table cannot be allocated."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Could not allocate storage for {capacity} slots")


class CapacityExceededError(ArrayTableError):
    """Raised when inserting a new key into a full fixed-capacity table."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(
            f"Table is full ({capacity} entries); "
            "create it with a larger capacity or growth='double'"
        )


class TableClosedError(ArrayTableError):
    """Raised when a table is used after kill()."""

    def __init__(self) -> None:
        super().__init__("Table has been killed and can no longer be used")


class CheckFailure(ArrayTableError):
    """Raised when a tabletest correctness check fails."""

    def __init__(self, check: str, message: str) -> None:
        self.check = check
        super().__init__(f"{check}: {message}")
