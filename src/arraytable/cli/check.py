"""arraytable check: run the table correctness checks."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import typer

from arraytable.cli import _exitcodes as ec
from arraytable.cli._output import print_error, print_object
from arraytable.errors import CheckFailure
from arraytable.harness import CheckResult, run_correctness_checks


def _print_ok(result: CheckResult) -> None:
    print(f"{result.description} - OK")


def run_checks(fmt: str) -> dict[str, Any]:
    """Run the checks, streaming progress in text mode.

    Raises typer.Exit(CHECK_FAILED) after reporting the first failure.
    """
    text = fmt == "text"
    try:
        results = run_correctness_checks(on_success=_print_ok if text else None)
    except CheckFailure as e:
        if text:
            print_error(str(e))
        else:
            print_object({"status": "failed", "check": e.check, "error": str(e)}, fmt=fmt)
        raise typer.Exit(ec.CHECK_FAILED)

    if text:
        print("All correctness tests succeeded!")
    return {"status": "ok", "checks": [asdict(r) for r in results]}


def check_cmd() -> None:
    """Run the correctness checks against a fresh table per check."""
    from arraytable.cli import state

    data = run_checks(state.fmt)
    if state.fmt != "text":
        print_object(data, fmt=state.fmt)
