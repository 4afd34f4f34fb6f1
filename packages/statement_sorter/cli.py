"""CLI for the ``statement_sorter`` package.

This module exposes callable command handlers (e.g., ``cmd_sort``) and a
Typer-based console interface. Environment variables are loaded from a local
``.env`` using ``python-dotenv`` before delegating to command logic. Business
logic lives in ``statement_sorter.workflows`` and the component modules.
"""

from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError
from typer.models import OptionInfo

from .categories import CategoryStore, load_base_categories
from .categorize import numbered_rows
from .config import build_state_port
from .errors import StatementSorterError
from .learning import parse_keywords, resolve_category, suggest_keywords
from .logging_setup import configure_logging, get_logger
from .models import CategoryGroups
from .persistence import StatePort
from .render import render_groups

_logger = get_logger("statement_sorter.cli")

# Failures reading or writing the state directory or database
_STATE_ERRORS: tuple[type[Exception], ...] = (OSError, SQLAlchemyError)


# ---- Small module-level helpers used by CLI commands -------------------------


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _open_state(database_url: str | None) -> tuple[CategoryStore, StatePort]:
    port = build_state_port(database_url=database_url)
    store = CategoryStore.load(load_base_categories(), port)
    return store, port


def _interactive_reassign(
    groups: CategoryGroups, store: CategoryStore, console: Console
) -> CategoryGroups:
    """Loop: pick rows, pick a category, confirm keywords, move, re-render."""

    # Local import keeps prompt_toolkit off the non-interactive path
    from .term_ui import (
        CreateCategoryRequest,
        prompt_keywords,
        prompt_new_category_name,
        prompt_row_selection,
        select_category_or_create,
    )
    from .workflows.statement_flow import reassign_selection

    while True:
        rows = numbered_rows(groups)
        if not rows:
            return groups
        picked = prompt_row_selection(max_row=len(rows))
        if not picked:
            return groups
        by_number = {n: tx for n, _category, tx in rows}
        selection = [by_number[n] for n in picked]

        choice = select_category_or_create(store.category_names())
        if isinstance(choice, CreateCategoryRequest):
            name = choice.name or prompt_new_category_name()
            if name is None:
                continue
            choice = name

        raw_keywords = prompt_keywords(suggest_keywords(selection), category=choice)
        if raw_keywords is None:
            continue

        try:
            result = reassign_selection(groups, selection, choice, raw_keywords, store=store)
        except StatementSorterError as e:
            _error(str(e))
            continue
        except _STATE_ERRORS as e:
            _error(f"failed to save state: {e}")
            continue
        groups = result.groups
        console.print(
            f"Learned {', '.join(result.learned.keywords)} → {result.learned.category}"
        )
        render_groups(groups, console=console)


# ---- Command handlers --------------------------------------------------------


def cmd_sort(
    csv_path: str,
    *,
    database_url: str | None = None,
    interactive: bool = False,
    console: Console | None = None,
) -> int:
    """Import ``csv_path``, print the category groups and summary.

    With ``interactive`` the user can then reassign rows; each reassignment
    learns keywords that apply to future imports.

    Errors are written to stderr and the function returns a non-zero exit
    status. On success, returns ``0``.
    """

    from .ingest.utils import read_csv_text
    from .workflows.statement_flow import import_statement_text

    console = console or Console()
    try:
        csv_text = read_csv_text(csv_path)
    except FileNotFoundError:
        return _error(f"File not found: {csv_path}")
    except PermissionError:
        return _error(f"Permission denied: {csv_path}")
    except UnicodeDecodeError as e:
        return _error(f"Failed to parse CSV: {e}")
    except OSError as e:
        return _error(f"Failed to read {csv_path}: {e}")

    try:
        store, port = _open_state(database_url)
    except (*_STATE_ERRORS, ValueError) as e:
        return _error(f"failed to load categories: {e}")

    try:
        result = import_statement_text(
            csv_text, store=store, port=port, on_progress=_logger.info
        )
    except csv.Error as e:
        return _error(f"Failed to parse CSV: {e}")
    except StatementSorterError as e:
        return _error(str(e))
    except _STATE_ERRORS as e:
        return _error(f"failed to save state: {e}")

    render_groups(result.groups, console=console)
    if interactive:
        _interactive_reassign(result.groups, store, console)
    return 0


def cmd_learn(
    category: str,
    keywords: str,
    *,
    database_url: str | None = None,
) -> int:
    """Commit ``keywords`` → ``category`` without importing a statement."""

    try:
        store, _port = _open_state(database_url)
        target = resolve_category(category)
        parsed = parse_keywords(keywords)
    except StatementSorterError as e:
        return _error(str(e))
    except (*_STATE_ERRORS, ValueError) as e:
        return _error(f"failed to load categories: {e}")

    try:
        store.learn(parsed, target)
    except _STATE_ERRORS as e:
        return _error(f"failed to save state: {e}")
    print(f"{target}\t{', '.join(parsed)}")
    return 0


def cmd_categories(*, database_url: str | None = None, console: Console | None = None) -> int:
    """Print the merged keyword table, flagging learned entries."""

    console = console or Console()
    try:
        store, _port = _open_state(database_url)
    except (*_STATE_ERRORS, ValueError) as e:
        return _error(f"failed to load categories: {e}")

    table = Table(title="Keywords")
    table.add_column("Keyword")
    table.add_column("Category")
    table.add_column("Source")
    for keyword in sorted(store):
        source = "custom" if keyword in store.custom else "base"
        table.add_row(keyword, store[keyword], source)
    console.print(table)
    return 0


def cmd_show_last(*, database_url: str | None = None, console: Console | None = None) -> int:
    """Re-categorize and print the last imported statement."""

    from .workflows.statement_flow import show_last_import

    console = console or Console()
    try:
        store, port = _open_state(database_url)
        result = show_last_import(store=store, port=port)
    except (*_STATE_ERRORS, ValueError) as e:
        return _error(f"failed to load state: {e}")

    if result is None:
        return _error("No saved import. Run `statement-sorter sort --csv-path ...` first.")
    render_groups(result.groups, console=console)
    return 0


# ---- Typer wiring ------------------------------------------------------------

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Sort bank statement CSV exports into spending categories.",
)


# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults). Typer will inspect this when used as a default value below.
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--csv-path",
    help="Path to a bank statement CSV export",
    dir_okay=False,
    file_okay=True,
    exists=False,  # allow non-existent here; the handler will report nice errors
)


def _database_url(ctx: typer.Context) -> str | None:
    return (ctx.obj or {}).get("database_url")


@app.command("sort")
def sort_cmd(
    ctx: typer.Context,
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Reassign rows and learn keywords after import."
    ),
) -> None:
    raise typer.Exit(
        cmd_sort(str(csv_path), database_url=_database_url(ctx), interactive=interactive)
    )


@app.command("learn")
def learn_cmd(
    ctx: typer.Context,
    *,
    category: str = typer.Option(..., "--category", help="Target category name."),
    keywords: str = typer.Option(..., "--keywords", help="Comma-separated keywords."),
) -> None:
    raise typer.Exit(cmd_learn(category, keywords, database_url=_database_url(ctx)))


@app.command("categories")
def categories_cmd(ctx: typer.Context) -> None:
    raise typer.Exit(cmd_categories(database_url=_database_url(ctx)))


@app.command("show-last")
def show_last_cmd(ctx: typer.Context) -> None:
    raise typer.Exit(cmd_show_last(database_url=_database_url(ctx)))


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    *,
    database_url: str | None = typer.Option(
        None, help="Store state in this database instead of the JSON state directory."
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures logging before any
    subcommand runs.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging()

    ctx.obj = {"database_url": database_url}
    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


def main() -> None:  # pragma: no cover - console script entry
    app()


if __name__ == "__main__":  # pragma: no cover - `python -m statement_sorter.cli`
    main()
