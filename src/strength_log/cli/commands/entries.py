"""Entry commands: list, add, edit, delete, clear."""

import dataclasses
import json
from typing import Annotated, Optional

import typer

from ...core.config import DEFAULT_DAY, DEFAULT_WEEK, FILTER_ALL, MAX_SETS
from ...core.exercises.registry import lookup, template_sets
from ...core.metrics import apply_filter, total_volume
from ...core.models import Entry, EntryFilter
from ...io.serializers import ValidationError, entry_to_dict, new_entry_id, today_iso, validate_date
from .. import views
from ..app import (
    CacheDirOption,
    JsonOption,
    RemoteUrlOption,
    app,
    check_day,
    check_week,
    get_engine,
    report_mode,
)


def _parse_sets(raw: str) -> list[str]:
    """Split a --sets value ("10,10,8") into set values, or exit."""
    values = [v.strip() for v in raw.split(",")]
    if len(values) > MAX_SETS:
        views.print_error(f"At most {MAX_SETS} sets per entry, got {len(values)}")
        raise typer.Exit(1)
    return values


def _check_date(date: str) -> str:
    try:
        return validate_date(date)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command("list")
def list_entries(
    week: Annotated[
        str,
        typer.Option("--week", "-w", help="Week 1-4, or 'all'"),
    ] = FILTER_ALL,
    day: Annotated[
        str,
        typer.Option("--day", "-d", help="Day A | B, or 'all'"),
    ] = FILTER_ALL,
    query: Annotated[
        str,
        typer.Option("--query", "-q", help="Search exercise name and notes"),
    ] = "",
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show logged entries, newest first, with total volume.
    """
    engine = get_engine(cache_dir, remote_url)
    day = day if day == FILTER_ALL else check_day(day)
    shown = apply_filter(engine.entries, EntryFilter(week=week, day=day, query=query))
    volume = total_volume(shown)

    if json_out:
        print(json.dumps({
            "mode": engine.mode.value,
            "total_volume": volume,
            "entries": [entry_to_dict(e) for e in shown],
        }, indent=2, ensure_ascii=False))
        return

    views.print_mode(engine.mode, engine.last_error)
    views.print_entries(shown, volume)


@app.command()
def add(
    exercise: Annotated[
        str,
        typer.Option("--exercise", "-e", help="Exercise ID or name (see 'catalog')"),
    ],
    date: Annotated[
        Optional[str],
        typer.Option("--date", help="Date (YYYY-MM-DD, default: today)"),
    ] = None,
    week: Annotated[
        str,
        typer.Option("--week", "-w", help="Plan week 1-4"),
    ] = DEFAULT_WEEK,
    day: Annotated[
        str,
        typer.Option("--day", "-d", help="Training day A | B"),
    ] = DEFAULT_DAY,
    weight: Annotated[
        str,
        typer.Option("--weight", "-l", help="Load (kg, s or m depending on exercise)"),
    ] = "",
    sets: Annotated[
        Optional[str],
        typer.Option("--sets", "-s", help="Comma-separated values per set, e.g. 10,10,8"),
    ] = None,
    template: Annotated[
        bool,
        typer.Option("--template", "-t", help="Fill sets from the exercise template"),
    ] = False,
    rpe: Annotated[
        str,
        typer.Option("--rpe", help="Perceived exertion"),
    ] = "",
    notes: Annotated[
        str,
        typer.Option("--notes", "-n", help="Free-text notes"),
    ] = "",
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
) -> None:
    """
    Log a new entry.

      strength-log add --exercise HT --week 2 --day A --weight 60 --sets 10,10,10
    """
    item = lookup(exercise)
    if sets is not None:
        values = _parse_sets(sets)
    elif template:
        values = template_sets(item.identifier)
    else:
        values = [""] * MAX_SETS

    entry = Entry(
        id=new_entry_id(),
        date=_check_date(date) if date else today_iso(),
        week=check_week(week),
        day=check_day(day),
        exercise=item.identifier,
        exercise_label=item.label,
        weight=weight,
        sets=values,
        rpe=rpe,
        notes=notes,
    )

    engine = get_engine(cache_dir, remote_url)
    engine.upsert(entry)
    views.print_success(f"Logged {entry.exercise_label} ({entry.date}, week {entry.week} day {entry.day}) as {entry.id}")
    report_mode(engine)


@app.command()
def edit(
    entry_id: Annotated[str, typer.Argument(help="ID of the entry to change")],
    date: Annotated[Optional[str], typer.Option("--date", help="New date (YYYY-MM-DD)")] = None,
    week: Annotated[Optional[str], typer.Option("--week", "-w", help="New week 1-4")] = None,
    day: Annotated[Optional[str], typer.Option("--day", "-d", help="New day A | B")] = None,
    exercise: Annotated[Optional[str], typer.Option("--exercise", "-e", help="New exercise ID or name")] = None,
    weight: Annotated[Optional[str], typer.Option("--weight", "-l", help="New load")] = None,
    sets: Annotated[Optional[str], typer.Option("--sets", "-s", help="New comma-separated set values")] = None,
    rpe: Annotated[Optional[str], typer.Option("--rpe", help="New RPE")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n", help="New notes")] = None,
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
) -> None:
    """
    Change fields of an existing entry.
    """
    engine = get_engine(cache_dir, remote_url)
    entry = engine.get(entry_id)
    if entry is None:
        views.print_error(f"No entry with id {entry_id}")
        raise typer.Exit(1)

    changes: dict = {}
    if date is not None:
        changes["date"] = _check_date(date)
    if week is not None:
        changes["week"] = check_week(week)
    if day is not None:
        changes["day"] = check_day(day)
    if exercise is not None:
        item = lookup(exercise)
        changes["exercise"] = item.identifier
        changes["exercise_label"] = item.label
    if weight is not None:
        changes["weight"] = weight
    if sets is not None:
        changes["sets"] = _parse_sets(sets)
    if rpe is not None:
        changes["rpe"] = rpe
    if notes is not None:
        changes["notes"] = notes

    if not changes:
        views.print_info("Nothing to change.")
        return

    engine.upsert(dataclasses.replace(entry, **changes))
    views.print_success(f"Updated {entry_id}: {', '.join(sorted(changes))}")
    report_mode(engine)


@app.command()
def delete(
    entry_id: Annotated[str, typer.Argument(help="ID of the entry to delete")],
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
) -> None:
    """
    Delete an entry by ID.
    """
    engine = get_engine(cache_dir, remote_url)
    target = engine.get(entry_id)
    if target is None:
        views.print_error(f"No entry with id {entry_id}")
        raise typer.Exit(1)

    engine.remove(entry_id)
    views.print_success(f"Deleted {target.exercise_label} ({target.date}), id {entry_id}")
    report_mode(engine)


@app.command()
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
) -> None:
    """
    Delete all entries.
    """
    engine = get_engine(cache_dir, remote_url)
    count = len(engine.entries)
    if count == 0:
        views.print_info("Nothing to delete.")
        return
    if not yes and not views.confirm_action(f"Delete all {count} entries?"):
        views.print_info("Cancelled.")
        return

    engine.clear()
    views.print_success(f"Deleted {count} entries.")
    report_mode(engine)
