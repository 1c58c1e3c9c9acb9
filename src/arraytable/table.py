"""Associative table over a densely packed BoundedArray.

Entries live in the prefix ``[low, low + count)`` of a single BoundedArray and
are found by linear scan. Inserting an existing key replaces its entry
(last write wins); removing a key moves the last live entry into the vacated
slot, so the prefix never has holes but survivors may change order.

The table owns every key and value stored in it. Whenever it drops one, on
overwrite, removal or kill, it hands the reference to the key or value
release callback registered at creation, exactly once. Entries moved during
compaction or growth are not released.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TextIO, TypeVar

from arraytable.bounded_array import BoundedArray
from arraytable.compare import CompareFunc, natural_compare
from arraytable.config import TableConfig
from arraytable.errors import CapacityExceededError, TableClosedError

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class _NotFound:
    """Type of the NOT_FOUND marker returned by lookups that miss."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Any = _NotFound()


@dataclass
class Entry(Generic[K, V]):
    """A key/value pair occupying one slot of the table."""

    key: K
    value: V

    def clear(self) -> None:
        self.key = None  # type: ignore[assignment]
        self.value = None  # type: ignore[assignment]


def _format_pair(key: Any, value: Any) -> str:
    return f"{key!r}: {value!r}"


class ArrayTable(Generic[K, V]):
    """Key/value table with linear-scan lookup and swap-compaction on removal."""

    def __init__(
        self,
        key_cmp: CompareFunc = natural_compare,
        key_release: Callable[[K], object] | None = None,
        value_release: Callable[[V], object] | None = None,
        *,
        config: TableConfig | None = None,
    ) -> None:
        self.config = config or TableConfig()
        self._key_cmp = key_cmp
        self._key_release = key_release
        self._value_release = value_release
        self._entries: BoundedArray[Entry[K, V]] | None = BoundedArray(
            self.config.low, self.config.high, Entry.clear
        )
        self._count = 0
        logger.debug(
            "Created table",
            extra={"capacity": self.config.capacity, "growth": self.config.growth},
        )

    @classmethod
    def empty(
        cls,
        key_cmp: CompareFunc,
        key_release: Callable[[K], object] | None = None,
        value_release: Callable[[V], object] | None = None,
        *,
        config: TableConfig | None = None,
    ) -> ArrayTable[K, V]:
        """Create an empty table.

        ``key_release`` and ``value_release`` are called on keys and values
        the table drops. Pass None to keep ownership with the caller.

        Raises AllocationError if the backing array cannot be allocated.
        """
        return cls(key_cmp, key_release, value_release, config=config)

    # -- state ---------------------------------------------------------

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._array().capacity

    @property
    def closed(self) -> bool:
        return self._entries is None

    def is_empty(self) -> bool:
        self._array()
        return self._count == 0

    def _array(self) -> BoundedArray[Entry[K, V]]:
        if self._entries is None:
            raise TableClosedError()
        return self._entries

    def _live(self, entries: BoundedArray[Entry[K, V]]) -> Iterator[Entry[K, V]]:
        for i in range(entries.low, entries.low + self._count):
            yield entries.get(i)  # type: ignore[misc]

    def _find(self, entries: BoundedArray[Entry[K, V]], key: Any) -> int | None:
        """Return the array index of the entry whose key equals ``key``."""
        for i in range(entries.low, entries.low + self._count):
            entry = entries.get(i)
            if self._key_cmp(key, entry.key) == 0:  # type: ignore[union-attr]
                return i
        return None

    def _release_pair(
        self,
        entry: Entry[K, V],
        *,
        keep_key: Any = NOT_FOUND,
        keep_value: Any = NOT_FOUND,
    ) -> None:
        """Hand a dropped entry's key and value to the release callbacks.

        The entry must already be detached from the table. References that are
        ``keep_key`` or ``keep_value`` stay owned by the table and are skipped.
        """
        try:
            if self._key_release is not None and entry.key is not keep_key:
                self._key_release(entry.key)
        finally:
            if self._value_release is not None and entry.value is not keep_value:
                self._value_release(entry.value)

    def _grow(self, old: BoundedArray[Entry[K, V]]) -> BoundedArray[Entry[K, V]]:
        capacity = old.capacity * 2
        new: BoundedArray[Entry[K, V]] = BoundedArray(
            old.low, old.low + capacity - 1, Entry.clear
        )
        for i in range(old.low, old.low + self._count):
            new.set(old.take(i), i)
        old.destroy()
        self._entries = new
        logger.debug(
            "Grew table", extra={"old_capacity": old.capacity, "capacity": new.capacity}
        )
        return new

    # -- operations ----------------------------------------------------

    def insert(self, key: K, value: V) -> None:
        """Add a key/value pair, replacing any entry with an equal key.

        The replaced key and value are released unless they are the very
        references being inserted. Raises CapacityExceededError when a new
        key does not fit a fixed-capacity table; the table is left unchanged
        and ownership of ``key`` and ``value`` stays with the caller.
        """
        entries = self._array()
        i = self._find(entries, key)
        if i is not None:
            old: Entry[K, V] = entries.take(i)  # type: ignore[assignment]
            entries.set(Entry(key, value), i)
            try:
                self._release_pair(old, keep_key=key, keep_value=value)
            finally:
                old.clear()
            return

        if self._count == entries.capacity:
            if self.config.growth != "double":
                logger.debug("Table full", extra={"capacity": entries.capacity})
                raise CapacityExceededError(entries.capacity)
            entries = self._grow(entries)

        entries.set(Entry(key, value), entries.low + self._count)
        self._count += 1

    def lookup(self, key: Any, default: Any = NOT_FOUND) -> Any:
        """Return the value stored under ``key``, or ``default`` (NOT_FOUND) if absent."""
        entries = self._array()
        i = self._find(entries, key)
        if i is None:
            return default
        return entries.get(i).value  # type: ignore[union-attr]

    def get(self, key: Any, default: Any = None) -> Any:
        return self.lookup(key, default)

    def remove(self, key: Any) -> bool:
        """Remove the entry for ``key``, releasing its key and value.

        The last live entry is moved into the freed slot, so the relative
        order of the remaining entries is not preserved. Returns False if
        ``key`` was not present.
        """
        entries = self._array()
        r = self._find(entries, key)
        if r is None:
            return False

        victim: Entry[K, V] = entries.take(r)  # type: ignore[assignment]
        last = entries.low + self._count - 1
        if r != last:
            entries.set(entries.take(last), r)
        self._count -= 1

        try:
            self._release_pair(victim)
        finally:
            victim.clear()
        return True

    def kill(self) -> None:
        """Release every key and value still in the table and destroy it."""
        entries = self._array()
        live = list(self._live(entries))
        self._entries = None
        self._count = 0
        try:
            for entry in live:
                self._release_pair(entry)
        finally:
            entries.destroy()

    destroy = kill

    # -- iteration and diagnostics ---------------------------------------

    def items(self) -> Iterator[tuple[K, V]]:
        for entry in self._live(self._array()):
            yield entry.key, entry.value

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[V]:
        for _, value in self.items():
            yield value

    def render(self, format_pair: Callable[[Any, Any], str] | None = None) -> str:
        fmt = format_pair or _format_pair
        return "\n".join(fmt(key, value) for key, value in self.items())

    def print(
        self,
        format_pair: Callable[[Any, Any], str] | None = None,
        file: TextIO | None = None,
    ) -> None:
        out = file if file is not None else sys.stdout
        fmt = format_pair or _format_pair
        for key, value in self.items():
            print(fmt(key, value), file=out)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __contains__(self, key: object) -> bool:
        return self._find(self._array(), key) is not None

    def __getitem__(self, key: Any) -> V:
        value = self.lookup(key)
        if value is NOT_FOUND:
            raise KeyError(key)
        return value

    def __enter__(self) -> ArrayTable[K, V]:
        return self

    def __exit__(self, *exc: object) -> None:
        if not self.closed:
            self.kill()

    def __repr__(self) -> str:
        if self.closed:
            return "ArrayTable(closed)"
        return f"ArrayTable(count={self._count}, capacity={self.capacity})"
