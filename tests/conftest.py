"""Shared test fixtures for arraytable tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from arraytable import ArrayTable, TableConfig, string_compare


@dataclass(eq=False)
class Resource:
    """Caller-allocated key or value whose releases are counted."""

    name: str
    released: int = 0

    def __repr__(self) -> str:
        return f"Resource({self.name!r})"


def compare_resources(a: Resource, b: Resource) -> int:
    return string_compare(a.name, b.name)


class ReleaseLog:
    """Release callback that records every reference it is handed."""

    def __init__(self) -> None:
        self.calls: list[Resource] = []

    def __call__(self, r: Resource) -> None:
        r.released += 1
        self.calls.append(r)

    @property
    def names(self) -> list[str]:
        return [r.name for r in self.calls]


# --- Fixtures ---


@pytest.fixture
def key_log():
    return ReleaseLog()


@pytest.fixture
def value_log():
    return ReleaseLog()


@pytest.fixture
def table(key_log, value_log):
    """A Resource table that releases keys and values into the logs."""
    t = ArrayTable.empty(
        compare_resources, key_log, value_log, config=TableConfig(capacity=8)
    )
    yield t
    if not t.closed:
        t.kill()


@pytest.fixture
def str_table():
    """A string table without release callbacks."""
    with ArrayTable.empty(string_compare) as t:
        yield t
