# src/maybekit/cli.py
"""
maybekit Command Line Interface (CLI).

This module applies the sequence scanners to files from the terminal using
`typer` and `rich`. Text files are streamed line by line, so `first` and
`single` stop reading as soon as the answer is known.

Commands
--------
- **first**: first (matching) line of a text file.
- **single**: the only (matching) line; fails if there is more than one.
- **get**: line at a 0-based index.
- **lookup**: value under a key of a JSON object file.
- **compact**: non-null items of a JSON array file.
- **laws**: run the monad/ordering law suite and render a table.

An absent result is not an error: it prints the configured "nothing" marker
and exits 0.

Usage
-----
    $ maybekit first server.log --contains ERROR
    $ maybekit lookup config.json timeout
    $ maybekit laws
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any, TextIO

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from maybekit.core.errors import MaybeError
from maybekit.core.maybe import Maybe
from maybekit.core.settings import get_logger, load_settings
from maybekit.laws import run_law_suite
from maybekit.sequences import compact, first, get_at, lookup, single

load_dotenv()

app = typer.Typer(
    help="maybekit: scan files for optional answers without surprises.",
    rich_markup_mode="markdown",
)
console = Console()
log = get_logger("maybekit.cli")

ExistingFile = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the input file.",
    ),
]
ContainsOption = Annotated[
    str | None,
    typer.Option("--contains", "-c", help="Only consider lines containing this text."),
]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _lines(handle: TextIO) -> Iterator[str]:
    """Lazily yield lines without their trailing newline."""
    for raw in handle:
        yield raw.rstrip("\r\n")


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def _render(result: Maybe[Any]) -> None:
    """Print the payload, or the dim "nothing" marker when absent."""
    if result.has_value():
        console.print(_as_text(result.value), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(f"[dim]{escape(load_settings().nothing_marker)}[/dim]")


def _fail(title: str, exc: Exception) -> typer.Exit:
    console.print(Panel(escape(str(exc)), title=f"❌ {title}", border_style="red"))
    return typer.Exit(code=1)


def _load_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise _fail("Invalid JSON", e) from e


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command("first")  # type: ignore[misc]
def first_line(file: ExistingFile, contains: ContainsOption = None) -> None:
    """Print the first line of FILE (optionally the first one containing TEXT)."""
    log.debug("first: file=%s contains=%r", file, contains)
    with file.open(encoding="utf-8") as handle:
        if contains is None:
            result = first(_lines(handle))
        else:
            result = first(_lines(handle), lambda line: contains in line)
    _render(result)


@app.command("single")  # type: ignore[misc]
def single_line(file: ExistingFile, contains: ContainsOption = None) -> None:
    """Print the only line of FILE (or the only one containing TEXT)."""
    log.debug("single: file=%s contains=%r", file, contains)
    try:
        with file.open(encoding="utf-8") as handle:
            if contains is None:
                result = single(_lines(handle))
            else:
                result = single(_lines(handle), lambda line: contains in line)
    except MaybeError as e:
        raise _fail("Not unique", e) from e
    _render(result)


@app.command("get")  # type: ignore[misc]
def get_line(
    file: ExistingFile,
    index: Annotated[int, typer.Argument(help="0-based line index.")],
) -> None:
    """Print the line of FILE at INDEX."""
    lines = file.read_text(encoding="utf-8").splitlines()
    _render(get_at(lines, index))


@app.command("lookup")  # type: ignore[misc]
def lookup_key(
    file: ExistingFile,
    key: Annotated[str, typer.Argument(help="Key in the top-level JSON object.")],
) -> None:
    """Print the value stored under KEY in a JSON object FILE."""
    data = _load_json(file)
    if not isinstance(data, dict):
        raise _fail("Invalid JSON", ValueError("Expected a top-level JSON object"))
    _render(lookup(data, key))


@app.command("compact")  # type: ignore[misc]
def compact_items(file: ExistingFile) -> None:
    """Print every non-null item of a JSON array FILE, one per line."""
    data = _load_json(file)
    if not isinstance(data, list):
        raise _fail("Invalid JSON", ValueError("Expected a top-level JSON array"))
    for item in compact(data):
        console.print(_as_text(item), markup=False, highlight=False, soft_wrap=True)


@app.command("laws")  # type: ignore[misc]
def laws() -> None:
    """Check the monad and ordering laws on built-in samples."""
    results = run_law_suite()

    table = Table(title="Maybe laws")
    table.add_column("Law", style="cyan")
    table.add_column("Sample")
    table.add_column("Result")
    for r in results:
        verdict = "[green]pass[/green]" if r.passed else "[red]FAIL[/red]"
        table.add_row(r.name, escape(r.sample), verdict)
    console.print(table)

    failed = [r for r in results if not r.passed]
    if failed:
        console.print(f"[bold red]❌ {len(failed)} law check(s) failed[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]✅ All {len(results)} law checks passed[/bold green]")


if __name__ == "__main__":
    app()
