"""arraytable run: correctness checks followed by the speed runs."""

from __future__ import annotations

from typing import Optional

import typer

from arraytable.cli._output import print_object
from arraytable.cli.bench import print_report, run_bench
from arraytable.cli.check import run_checks
from arraytable.harness import MAX_TABLE_SIZE


def run_cmd(
    n: int = typer.Argument(MAX_TABLE_SIZE, help=f"Number of items, 1-{MAX_TABLE_SIZE}"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for key order"),
) -> None:
    """Run every correctness check, then the speed runs."""
    from arraytable.cli import state

    checks = run_checks(state.fmt)
    report = run_bench(n, seed=seed, capacity=None, growth=None)

    if state.fmt == "text":
        print()
        print_report(report, state.fmt)
        print("Test completed.")
    else:
        print_object(
            {**checks, "benchmark": report.model_dump(mode="json")},
            fmt=state.fmt,
        )
