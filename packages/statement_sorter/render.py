"""Rich rendering of category groups and the summary block."""

from __future__ import annotations

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from .categorize import numbered_rows, ordered_categories, summarize
from .models import CategoryGroups, Summary


def _money(value: float) -> str:
    return f"{value:.2f}"


def build_group_tables(groups: CategoryGroups) -> list[Table]:
    """One table per category, in display order, with global row numbers."""

    numbers = {tx.idx: n for n, _cat, tx in numbered_rows(groups)}
    subtotals = summarize(groups).subtotals
    tables: list[Table] = []
    for category in ordered_categories(groups):
        table = Table(
            title=category,
            title_justify="left",
            caption=f"Subtotal: {_money(subtotals.get(category, 0.0))}",
            caption_justify="right",
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Date")
        table.add_column("Amount", justify="right")
        table.add_column("Description")
        for tx in groups[category]:
            style = "green" if tx.amount > 0 else None
            table.add_row(
                str(numbers[tx.idx]),
                tx.date,
                Text(_money(tx.amount), style=style or ""),
                tx.description,
            )
        tables.append(table)
    return tables


def build_summary(summary: Summary) -> Group:
    return Group(
        Text("Summary", style="bold"),
        Text(f"Total Income: ${_money(summary.total_income)}"),
        Text(f"Total Expenses: ${_money(summary.total_expenses)}"),
        Text(f"Net: ${_money(summary.net)}", style="bold"),
    )


def render_groups(groups: CategoryGroups, *, console: Console | None = None) -> None:
    console = console or Console()
    for table in build_group_tables(groups):
        console.print(table)
    console.print(build_summary(summarize(groups)))


__all__ = ["build_group_tables", "build_summary", "render_groups"]
