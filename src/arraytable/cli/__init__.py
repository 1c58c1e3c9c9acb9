"""arraytable CLI: tabletest correctness and speed driver."""

from __future__ import annotations

from typing import Optional

import typer

from arraytable.cli import bench, check, run
from arraytable.cli._output import OUTPUT_FORMATS

app = typer.Typer(
    name="arraytable",
    help="arraytable CLI: correctness checks and speed runs for ArrayTable.",
    no_args_is_help=True,
)


class _State:
    """Global CLI state shared across subcommands."""

    fmt: str = "text"
    log_level: str = "WARNING"


state = _State()


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError, version

        try:
            v = version("arraytable")
        except PackageNotFoundError:
            v = "unknown"
        print(f"arraytable {v}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="JSON output (same as --format json)"),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        envvar="ARRAYTABLE_FORMAT",
        help="Output format: text, json or yaml",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="ARRAYTABLE_LOG_LEVEL", help="Logging level"
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version", is_eager=True, callback=_version_callback
    ),
) -> None:
    """Global options for all arraytable commands."""
    from arraytable.log import setup_logging

    resolved_fmt = fmt or ("json" if json_output else "text")
    if resolved_fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown format '{resolved_fmt}'; expected one of {list(OUTPUT_FORMATS)}"
        )
    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    state.fmt = resolved_fmt
    state.log_level = log_level
    if ctx.invoked_subcommand is None and not version:
        print(ctx.get_help())
        raise typer.Exit()


app.command(name="check")(check.check_cmd)
app.command(name="bench")(bench.bench_cmd)
app.command(name="run")(run.run_cmd)


def main() -> None:
    """Entry point for the arraytable CLI."""
    app()
