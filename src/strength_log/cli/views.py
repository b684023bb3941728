"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of entries, progress and catalog.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config import MAX_SETS
from ..core.exercises.base import CatalogItem, PlanDay
from ..core.metrics import completion_percent, entry_volume, progress_ratio
from ..core.models import Entry, ExerciseProgress, SyncMode

console = Console()


def _fmt_number(value: float) -> str:
    return f"{value:.0f}" if value == int(value) else f"{value:.1f}"


def format_entry_table(entries: list[Entry], title: str = "Training Log") -> Table:
    """
    Create a Rich table displaying entries.

    Sets are padded to MAX_SETS columns for display only.

    Args:
        entries: Entries to display, in display order

    Returns:
        Rich Table object
    """
    table = Table(title=title)

    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Wk", justify="right")
    table.add_column("Day", style="magenta")
    table.add_column("Exercise", style="green")
    table.add_column("Load", justify="right")
    for i in range(1, MAX_SETS + 1):
        table.add_column(f"S{i}", justify="right")
    table.add_column("RPE", justify="right")
    table.add_column("Done", justify="right")
    table.add_column("Volume", justify="right", style="bold")
    table.add_column("Notes")

    for e in entries:
        sets = list(e.sets[:MAX_SETS])
        sets += [""] * (MAX_SETS - len(sets))
        table.add_row(
            escape(e.id),
            escape(e.date),
            escape(e.week),
            escape(e.day),
            escape(e.exercise_label),
            escape(e.weight) or "-",
            *[escape(s or "") for s in sets],
            escape(e.rpe or ""),
            f"{completion_percent(e):.0f}%",
            _fmt_number(entry_volume(e)),
            escape(e.notes or ""),
        )

    return table


def print_entries(entries: list[Entry], volume: float) -> None:
    """
    Print the (filtered) log and its total volume.

    Args:
        entries: Entries to display
        volume: Total volume of the displayed entries
    """
    if not entries:
        console.print("[yellow]No entries yet. Add the first one with 'add'.[/yellow]")
        return

    console.print(format_entry_table(entries))
    console.print(f"Total volume (kg·rep): [bold]{_fmt_number(volume)}[/bold]")


def format_progress_table(progress: list[ExerciseProgress], week: str) -> Table:
    """
    Create a Rich table of current-week volume against the best entry.

    The percentage is clamped to [0, 100] for display.
    """
    table = Table(title=f"Progress, week {week}")

    table.add_column("Exercise", style="green")
    table.add_column("This week", justify="right")
    table.add_column("Best entry", justify="right")
    table.add_column("%", justify="right", style="bold")
    table.add_column("", min_width=20)

    for p in progress:
        pct = max(0.0, min(100.0, progress_ratio(p)))
        bar = "█" * int(round(pct / 5))
        table.add_row(
            escape(p.label),
            _fmt_number(p.current_week_volume),
            _fmt_number(p.best_week_volume),
            f"{pct:.0f}%",
            f"[cyan]{bar}[/cyan]",
        )

    return table


def print_catalog(grouped: dict[str, list[CatalogItem]]) -> None:
    """Print the exercise catalog grouped by category."""
    table = Table(title="Exercises")
    table.add_column("Category", style="magenta")
    table.add_column("ID", style="dim")
    table.add_column("Exercise", style="green")
    table.add_column("Unit")
    table.add_column("Template")

    for category, items in grouped.items():
        for i, item in enumerate(items):
            table.add_row(
                category if i == 0 else "",
                item.identifier,
                escape(item.label),
                item.unit,
                " / ".join(item.template),
            )

    console.print(table)


def print_plan(plan: tuple[PlanDay, ...]) -> None:
    """Print the static 4-week A/B plan."""
    if not plan:
        print_warning("No training plan defined.")
        return
    console.print()
    console.print("[bold]Training Plan[/bold]")
    for day in plan:
        console.print()
        console.print(f"[bold cyan]{day.title}[/bold cyan]")
        for block in day.blocks:
            console.print(f"  • [bold]{block.name}:[/bold] {block.detail}")
    console.print()


def print_mode(mode: SyncMode, last_error: str | None = None) -> None:
    """Show whether changes are reaching the remote store."""
    if mode is SyncMode.OFFLINE:
        detail = f" ({escape(last_error)})" if last_error else ""
        console.print(f"[yellow]Offline: changes are kept in the local cache{detail}[/yellow]")
    elif mode is SyncMode.ONLINE:
        console.print("[dim]Online: synced with remote store[/dim]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} \\[y/N]: ")
    return response.lower() in ("y", "yes")
