"""tabletest: correctness checks and speed runs against the ArrayTable interface.

The harness is an ordinary client of the table. Every check and every timed
measurement builds its own table and kills it afterwards, so results do not
depend on state left over by a previous step.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel, Field

from arraytable.compare import int_compare, string_compare
from arraytable.config import TableConfig
from arraytable.errors import CheckFailure
from arraytable.table import NOT_FOUND, ArrayTable

MAX_TABLE_SIZE = 40000


@dataclass
class CheckResult:
    """Outcome of one passed correctness check."""

    name: str
    description: str


class BenchmarkResult(BaseModel):
    name: str
    label: str
    operations: int
    elapsed_ms: float


class BenchmarkReport(BaseModel):
    n: int = Field(ge=1, le=MAX_TABLE_SIZE)
    seed: int | None = None
    capacity: int
    growth: str
    results: list[BenchmarkResult] = Field(default_factory=list)


# --- Correctness checks ---


def _string_table() -> ArrayTable[str, str]:
    return ArrayTable.empty(string_compare)


def _expect(condition: bool, check: str, message: str) -> None:
    if not condition:
        raise CheckFailure(check, message)


def _expect_value(t: ArrayTable[str, str], key: str, value: str, check: str) -> None:
    found = t.lookup(key)
    _expect(
        found is not NOT_FOUND,
        check,
        f"Looked up existing key '{key}', table claims it does not exist.",
    )
    _expect(
        found == value,
        check,
        f"Looked up '{key}' but the value returned was wrong. Expected: {value} but got {found}.",
    )


def _expect_missing(t: ArrayTable[str, str], key: str, check: str) -> None:
    found = t.lookup(key)
    _expect(
        found is NOT_FOUND,
        check,
        f"Looked up missing key '{key}', table claims it has value {found}.",
    )


def check_isempty() -> None:
    with ArrayTable.empty(int_compare) as t:
        _expect(t.is_empty(), "isempty", "A newly created empty table is said to be nonempty.")


def check_insert_single_element() -> None:
    with _string_table() as t:
        t.insert("key1", "value1")
        _expect(
            not t.is_empty(),
            "insert_single_element",
            "A table with one inserted element is seen as empty.",
        )


def check_lookup_single_element() -> None:
    name = "lookup_single_element"
    with _string_table() as t:
        t.insert("key1", "value1")
        _expect_missing(t, "key2", name)
        _expect_value(t, "key1", "value1", name)


def check_insert_lookup_different_keys() -> None:
    name = "insert_lookup_different_keys"
    with _string_table() as t:
        pairs = [("key1", "value1"), ("key2", "value2"), ("key3", "value3")]
        for n, (key, value) in enumerate(pairs, start=1):
            t.insert(key, value)
            for k, v in pairs[:n]:
                _expect_value(t, k, v, name)


def check_insert_lookup_same_keys() -> None:
    name = "insert_lookup_same_keys"
    with _string_table() as t:
        for value in ("value1", "value2", "value3"):
            t.insert("key1", value)
            _expect_value(t, "key1", value, name)


def check_remove_single_element() -> None:
    with _string_table() as t:
        t.insert("key1", "value1")
        t.remove("key1")
        _expect(
            t.is_empty(),
            "remove_single_element",
            "Removing the last element from a table does not result in an empty table.",
        )


def check_remove_elements_different_keys() -> None:
    name = "remove_elements_different_keys"
    keys = ["key1", "key2", "key3"]
    with _string_table() as t:
        for key in keys:
            t.insert(key, key.replace("key", "value"))

        for n, key in enumerate(keys, start=1):
            t.remove(key)
            remaining = keys[n:]
            if remaining:
                _expect(
                    not t.is_empty(),
                    name,
                    f"Should be {len(remaining)} element(s) left in the table "
                    "but it says it is empty.",
                )
            else:
                _expect(
                    t.is_empty(),
                    name,
                    "Removing the last element from a table does not result in an empty table.",
                )
            for gone in keys[:n]:
                _expect_missing(t, gone, name)
            for k in remaining:
                _expect_value(t, k, k.replace("key", "value"), name)


def check_remove_elements_same_keys() -> None:
    name = "remove_elements_same_keys"
    with _string_table() as t:
        t.insert("key1", "value11")
        t.insert("key2", "value21")
        t.insert("key2", "value22")
        t.insert("key2", "value23")

        t.remove("key1")
        _expect_missing(t, "key1", name)
        _expect_value(t, "key2", "value23", name)

        t.remove("key2")
        _expect_missing(t, "key2", name)
        _expect(
            t.is_empty(),
            name,
            "Removing the last element from a table does not result in an empty table.",
        )


CHECKS: list[tuple[str, str, Callable[[], None]]] = [
    (
        "isempty",
        "Isempty returns true directly after a table is created.",
        check_isempty,
    ),
    (
        "insert_single_element",
        "Isempty false if one element is inserted to table.",
        check_insert_single_element,
    ),
    (
        "lookup_single_element",
        "Looking up non-existing and existing key in a table with one element.",
        check_lookup_single_element,
    ),
    (
        "insert_lookup_different_keys",
        "Looking up three existing key-value pairs in a table with three elements.",
        check_insert_lookup_different_keys,
    ),
    (
        "insert_lookup_same_keys",
        "Looking up existing key and value after inserting the same key "
        "three times with different values.",
        check_insert_lookup_same_keys,
    ),
    (
        "remove_single_element",
        "Inserting one element and removing it, checking that the table gets empty.",
        check_remove_single_element,
    ),
    (
        "remove_elements_different_keys",
        "Inserting three elements and removing them, should end with empty table.",
        check_remove_elements_different_keys,
    ),
    (
        "remove_elements_same_keys",
        "Inserting three elements with the same key and removing the key, "
        "should end with empty table.",
        check_remove_elements_same_keys,
    ),
]


def run_correctness_checks(
    on_success: Callable[[CheckResult], None] | None = None,
) -> list[CheckResult]:
    """Run every correctness check in order.

    Raises CheckFailure on the first failing check; ``on_success`` is called
    after each check that passes.
    """
    results = []
    for name, description, check in CHECKS:
        check()
        result = CheckResult(name=name, description=description)
        results.append(result)
        if on_success is not None:
            on_success(result)
    return results


# --- Speed runs ---


def _int_table(config: TableConfig) -> ArrayTable[int, int]:
    return ArrayTable.empty(int_compare, config=config)


def _fill(t: ArrayTable[int, int], keys: list[int], values: list[int], n: int) -> None:
    for i in range(n):
        t.insert(keys[i], values[i])


def _timed(fn: Callable[[], None]) -> float:
    start = time.perf_counter()
    fn()
    return round((time.perf_counter() - start) * 1000.0, 3)


def run_speed_tests(
    n: int,
    *,
    seed: int | None = None,
    config: TableConfig | None = None,
) -> BenchmarkReport:
    """Time bulk insert, remove and lookup workloads on tables of ``n`` int keys.

    Keys are a shuffled sample of ``0..2n-1``; only the first ``n`` are
    inserted, so ``keys[n:]`` are guaranteed misses.
    """
    if n < 1 or n > MAX_TABLE_SIZE:
        raise ValueError(f"n must be in the range 1-{MAX_TABLE_SIZE}, got {n}")
    config = config or TableConfig(capacity=n)
    rng = random.Random(seed)

    keys = list(range(2 * n))
    rng.shuffle(keys)
    values = list(range(n))
    rng.shuffle(values)

    report = BenchmarkReport(n=n, seed=seed, capacity=config.capacity, growth=config.growth)

    def record(name: str, label: str, fn: Callable[[ArrayTable[int, int]], None]) -> None:
        with _int_table(config) as t:
            if name != "insert":
                _fill(t, keys, values, n)
            elapsed = _timed(lambda: fn(t))
        report.results.append(
            BenchmarkResult(name=name, label=label, operations=n, elapsed_ms=elapsed)
        )

    def insert_all(t: ArrayTable[int, int]) -> None:
        _fill(t, keys, values, n)

    def remove_all(t: ArrayTable[int, int]) -> None:
        order = keys[:n]
        rng.shuffle(order)
        for key in order:
            t.remove(key)

    def lookup_missing(t: ArrayTable[int, int]) -> None:
        for i in range(n):
            t.lookup(keys[n + i])

    def lookup_random(t: ArrayTable[int, int]) -> None:
        for _ in range(n):
            t.lookup(keys[rng.randrange(n)])

    def lookup_skewed(t: ArrayTable[int, int]) -> None:
        start = n // 3
        partition = n * 2 // 3 - start + 1
        for _ in range(n):
            t.lookup(keys[rng.randrange(partition) + start])

    record("insert", f"Insert {n:5d} items", insert_all)
    record("remove", "Remove all items", remove_all)
    record("lookup_missing", f"{n:5d} lookups with non-existent keys", lookup_missing)
    record("lookup_random", f"{n:5d} random lookups", lookup_random)
    record("lookup_skewed", f"{n:5d} skewed lookups", lookup_skewed)
    return report
