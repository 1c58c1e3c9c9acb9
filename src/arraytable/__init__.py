"""arraytable: bounded arrays and a dense, linear-scan key/value table."""

__version__ = "0.1.0"

from arraytable.bounded_array import BoundedArray
from arraytable.compare import int_compare, natural_compare, string_compare
from arraytable.config import TableConfig
from arraytable.errors import (
    AllocationError,
    ArrayTableError,
    CapacityExceededError,
    CheckFailure,
    InvalidBoundsError,
    TableClosedError,
)
from arraytable.table import NOT_FOUND, ArrayTable, Entry

__all__ = [
    "__version__",
    "BoundedArray",
    "ArrayTable",
    "Entry",
    "NOT_FOUND",
    "TableConfig",
    "int_compare",
    "string_compare",
    "natural_compare",
    "ArrayTableError",
    "InvalidBoundsError",
    "AllocationError",
    "CapacityExceededError",
    "TableClosedError",
    "CheckFailure",
]
