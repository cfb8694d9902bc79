"""Rich formatting helpers for the pinlist CLI.

Provides functions that format PinList views for terminal display.
Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pinlist.pinlist import PinList


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)


def _label(item: Any, label_key: str | None) -> str:
    if label_key is not None and isinstance(item, dict) and label_key in item:
        return str(item[label_key])
    return str(item)


def format_items(
    title: str,
    items: Sequence[Any],
    pins: PinList,
    console: Console,
    *,
    label_key: str | None = None,
    limit: int | None = None,
    empty_message: str = "No items.",
) -> None:
    """Display items as a table with position, pin marker, id, and label."""
    console.print(f"[bold]{escape(title)}[/bold]")
    if not items:
        console.print(f"[dim]{escape(empty_message)}[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Pin", width=3)
    table.add_column("Id", style="yellow")
    table.add_column("Item")

    shown = items if limit is None else items[:limit]
    id_of: Callable[[Any], Any] = pins.resolver.id_of
    for position, item in enumerate(shown):
        item_id = id_of(item)
        table.add_row(
            str(position),
            "[green]*[/green]" if item_id in pins.pin_set else "",
            escape(str(item_id)),
            escape(_label(item, label_key)),
        )

    console.print(table)
    hidden = len(items) - len(shown)
    if hidden > 0:
        console.print(f"[dim]... {hidden} more[/dim]")


def format_stats(pins: PinList, console: Console, *, elapsed_ms: float | None = None) -> None:
    """Display total/pinned/stale counts and optional partition time."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Stat", style="bold")
    table.add_column("Value", justify="right")

    limit = pins.max_pinned_items
    capacity = f" / {limit}" if limit is not None else ""
    table.add_row("Total items", f"{len(pins):,}")
    table.add_row("Pinned items", f"{len(pins.views.pinned):,}{capacity}")
    stale = pins.stale_ids
    if stale:
        table.add_row("Stale pins", f"[yellow]{len(stale)}[/yellow]")
    if elapsed_ms is not None:
        table.add_row("Partition time", f"{elapsed_ms:.2f}ms")
    console.print(table)


def format_pinned_ids(pins: PinList, console: Console) -> None:
    """Display pinned ids in pin order, stale ones dimmed."""
    if not pins.pinned_ids:
        console.print("[dim]No pins.[/dim]")
        return
    stale = set(pins.stale_ids)
    parts = []
    for item_id in pins.pinned_ids:
        text = escape(str(item_id))
        parts.append(f"[dim]{text} (stale)[/dim]" if item_id in stale else f"[yellow]{text}[/yellow]")
    console.print("Pin order: " + ", ".join(parts))
