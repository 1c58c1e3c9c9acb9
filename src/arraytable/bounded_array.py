"""Fixed-range, integer-indexed array of opaque references.

A BoundedArray covers the inclusive index range ``[low, high]``. Each slot is
either empty (``None``) or holds exactly one reference. An optional release
callback is invoked whenever an occupied slot is overwritten or the array is
destroyed, so the array can own the references stored in it.
"""

from __future__ import annotations

import sys
from typing import Callable, Generic, Iterator, TextIO, TypeVar

from arraytable.errors import AllocationError, InvalidBoundsError

T = TypeVar("T")

ReleaseFunc = Callable[[T], object]


class BoundedArray(Generic[T]):
    """Array over the inclusive index range ``[low, high]``.

    Indices outside the range are a caller precondition: they are not checked
    and may read or write an unrelated slot.
    """

    __slots__ = ("_low", "_high", "_values", "_release")

    def __init__(self, low: int, high: int, release: ReleaseFunc[T] | None = None) -> None:
        if low > high:
            raise InvalidBoundsError(low, high)
        capacity = high - low + 1
        try:
            values: list[T | None] = [None] * capacity
        except (MemoryError, OverflowError) as e:
            raise AllocationError(capacity) from e
        self._low = low
        self._high = high
        self._values = values
        self._release = release

    @classmethod
    def create(
        cls, low: int, high: int, release: ReleaseFunc[T] | None = None
    ) -> BoundedArray[T]:
        """Create an array without values over ``[low, high]``."""
        return cls(low, high, release)

    @property
    def low(self) -> int:
        return self._low

    @property
    def high(self) -> int:
        return self._high

    @property
    def capacity(self) -> int:
        return self._high - self._low + 1

    def get(self, i: int) -> T | None:
        """Return the reference stored at index ``i``, or None if the slot is empty."""
        return self._values[i - self._low]

    inspect_value = get

    def has_value(self, i: int) -> bool:
        return self._values[i - self._low] is not None

    def set(self, v: T | None, i: int) -> None:
        """Store ``v`` at index ``i``.

        The previous occupant, if any, is handed to the release callback
        before being replaced. Passing ``None`` clears the slot.
        """
        offset = i - self._low
        old = self._values[offset]
        if old is not None and self._release is not None:
            self._release(old)
        self._values[offset] = v

    def take(self, i: int) -> T | None:
        """Clear slot ``i`` and return its occupant without releasing it.

        Ownership of the returned reference passes to the caller.
        """
        offset = i - self._low
        old = self._values[offset]
        self._values[offset] = None
        return old

    def destroy(self) -> None:
        """Release every remaining occupant and drop the slot storage.

        Calling this twice is a caller error.
        """
        if self._release is not None:
            for v in self._values:
                if v is not None:
                    self._release(v)
        self._values = []

    kill = destroy

    def render(self, format_fn: Callable[[T], str] = repr) -> str:
        """Return the bracketed rendering used by print()."""
        parts = []
        for i in range(self._low, self._high + 1):
            if self.has_value(i):
                parts.append(f"[{format_fn(self.get(i))}]")  # type: ignore[arg-type]
            else:
                parts.append(" []")
        return f"[ {', '.join(parts)} ]"

    def print(self, format_fn: Callable[[T], str] = repr, file: TextIO | None = None) -> None:
        print(self.render(format_fn), file=file if file is not None else sys.stdout)

    def __len__(self) -> int:
        return self.capacity

    def __iter__(self) -> Iterator[tuple[int, T]]:
        for offset, v in enumerate(self._values):
            if v is not None:
                yield self._low + offset, v

    def __repr__(self) -> str:
        used = sum(1 for v in self._values if v is not None)
        return f"BoundedArray(low={self._low}, high={self._high}, used={used})"
