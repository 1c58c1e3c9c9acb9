"""arraytable bench: time bulk insert, remove and lookup workloads."""

from __future__ import annotations

from typing import Optional

import typer

from arraytable.cli import _exitcodes as ec
from arraytable.cli._config import config_from_env
from arraytable.cli._output import print_error, print_object, print_table
from arraytable.config import TableConfig
from arraytable.errors import CapacityExceededError
from arraytable.harness import MAX_TABLE_SIZE, BenchmarkReport, run_speed_tests


def run_bench(
    n: int,
    *,
    seed: int | None,
    capacity: int | None,
    growth: str | None,
) -> BenchmarkReport:
    """Validate options and run the speed tests, exiting on bad input."""
    if n < 1 or n > MAX_TABLE_SIZE:
        print_error(f"supplied value of n ({n}) is outside allowed range 1-{MAX_TABLE_SIZE}.")
        raise typer.Exit(ec.USAGE_ERROR)

    try:
        config = config_from_env(capacity=capacity, growth=growth, fallback=TableConfig(capacity=n))
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(ec.USAGE_ERROR)

    try:
        return run_speed_tests(n, seed=seed, config=config)
    except CapacityExceededError as e:
        print_error(str(e))
        raise typer.Exit(ec.CAPACITY_ERROR)


def print_report(report: BenchmarkReport, fmt: str) -> None:
    if fmt == "text":
        rows = [[r.label, f"{r.elapsed_ms:.3f}"] for r in report.results]
        print_table(["measurement", "elapsed_ms"], rows)
    else:
        print_object(report.model_dump(mode="json"), fmt=fmt)


def bench_cmd(
    n: int = typer.Argument(MAX_TABLE_SIZE, help=f"Number of items, 1-{MAX_TABLE_SIZE}"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for key order"),
    capacity: Optional[int] = typer.Option(
        None, "--capacity", help="Initial table capacity (default: n)"
    ),
    growth: Optional[str] = typer.Option(
        None, "--growth", help="Growth policy when full: fixed or double"
    ),
) -> None:
    """Time insert, remove and lookup workloads on a table of n int keys."""
    from arraytable.cli import state

    report = run_bench(n, seed=seed, capacity=capacity, growth=growth)
    print_report(report, state.fmt)
