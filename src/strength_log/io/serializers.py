"""
JSON serialization and validation for training entries.

Handles conversion between Entry dataclasses and the JSON-compatible dicts
used by the remote API and the local cache, validation at those
boundaries, and the upgrade of legacy cache records.
"""

import json
import re
import uuid
from datetime import datetime
from typing import Any

from ..core.config import DAYS, DEFAULT_DAY, DEFAULT_WEEK, ENTRY_ID_LENGTH, MAX_SETS
from ..core.exercises.registry import lookup
from ..core.models import Entry
from .errors import ValidationError

__all__ = [
    "ValidationError",
    "dict_to_entry",
    "entries_to_json",
    "entry_to_dict",
    "migrate_legacy",
    "new_entry_id",
    "parse_entry_records",
    "today_iso",
    "validate_date",
    "validate_entry",
]


def new_entry_id() -> str:
    """Return a fresh opaque entry id."""
    return uuid.uuid4().hex[:ENTRY_ID_LENGTH]


def today_iso() -> str:
    """Return today's date as YYYY-MM-DD."""
    return datetime.now().strftime("%Y-%m-%d")


def validate_date(date_str: str) -> str:
    """
    Validate a user-typed date string.

    Entries received from storage are not held to this; only new input is.

    Args:
        date_str: Date string to validate

    Returns:
        The YYYY-MM-DD string

    Raises:
        ValidationError: If date format is invalid
    """
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ValidationError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(f"Invalid date: {date_str}") from e

    return date_str


def validate_required_string(value: Any, name: str) -> str:
    """
    Validate that a value is a non-empty string.

    Args:
        value: Value to validate
        name: Field name for the error message

    Returns:
        The value if valid

    Raises:
        ValidationError: If value is missing, empty or not a string
    """
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{name} must be a non-empty string, got {value!r}")
    return value


def validate_string(value: Any, name: str) -> str:
    """Validate that a value is a string (possibly empty)."""
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {value!r}")
    return value


def validate_optional_string(value: Any, name: str) -> str | None:
    """Validate that a value is a string or None."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{name} must be a string or null, got {value!r}")
    return value


def validate_day(day: Any) -> str:
    """
    Validate training day.

    Raises:
        ValidationError: If day is not exactly "A" or "B"
    """
    if day not in DAYS:
        raise ValidationError(f"Invalid day: {day!r}. Must be one of {DAYS}")
    return day


def validate_sets(sets: Any) -> list[str]:
    """
    Validate the per-set values of an entry.

    Raises:
        ValidationError: If sets is missing, not a list of strings, or too long
    """
    if not isinstance(sets, list):
        raise ValidationError(f"sets must be a list, got {sets!r}")
    if len(sets) > MAX_SETS:
        raise ValidationError(f"sets holds at most {MAX_SETS} values, got {len(sets)}")
    for i, value in enumerate(sets, 1):
        validate_string(value, f"set{i}")
    return sets


def validate_entry(entry: Entry) -> Entry:
    """
    Validate an entry against the remote boundary rules.

    Args:
        entry: Entry to validate

    Returns:
        The entry if valid

    Raises:
        ValidationError: If any field has the wrong shape
    """
    validate_required_string(entry.id, "id")
    validate_required_string(entry.date, "date")
    validate_required_string(entry.week, "week")
    validate_day(entry.day)
    validate_string(entry.exercise, "exercise")
    validate_string(entry.exercise_label, "exerciseLabel")
    validate_string(entry.weight, "weight")
    validate_sets(entry.sets)
    validate_optional_string(entry.rpe, "rpe")
    validate_optional_string(entry.notes, "notes")
    return entry


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """
    Convert Entry to its JSON wire form.

    Args:
        entry: Entry to convert

    Returns:
        Dict with camelCase ``exerciseLabel``
    """
    return {
        "id": entry.id,
        "date": entry.date,
        "week": entry.week,
        "day": entry.day,
        "exercise": entry.exercise,
        "exerciseLabel": entry.exercise_label,
        "weight": entry.weight,
        "sets": list(entry.sets),
        "rpe": entry.rpe,
        "notes": entry.notes,
    }


def dict_to_entry(data: dict[str, Any]) -> Entry:
    """
    Convert a wire/cache dict to a validated Entry.

    Accepts the server's ``exercise_label`` column name as well as
    ``exerciseLabel``; unknown keys (e.g. ``created_at``) are ignored.

    Args:
        data: Dict representation

    Returns:
        Entry instance

    Raises:
        ValidationError: If data is not a dict or fails validation
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Entry record must be an object, got {type(data).__name__}")

    label = data.get("exerciseLabel", data.get("exercise_label"))
    sets = data.get("sets")

    entry = Entry(
        id=data.get("id"),  # type: ignore[arg-type]
        date=data.get("date"),  # type: ignore[arg-type]
        week=data.get("week"),  # type: ignore[arg-type]
        day=data.get("day"),  # type: ignore[arg-type]
        exercise=data.get("exercise"),  # type: ignore[arg-type]
        exercise_label=label,  # type: ignore[arg-type]
        weight=data.get("weight"),  # type: ignore[arg-type]
        sets=list(sets) if isinstance(sets, list) else sets,  # type: ignore[arg-type]
        rpe=data.get("rpe"),
        notes=data.get("notes"),
    )
    return validate_entry(entry)


def migrate_legacy(old: dict[str, Any]) -> Entry:
    """
    Upgrade a record of the previous cache schema (no ``exerciseLabel``).

    The stored ``exercise`` may be an identifier or a display label; both
    are resolved through the catalog so that the upgraded entry carries the
    identifier plus its label.  Missing fields get the CSV import defaults;
    a day other than A or B (in any case) becomes the default day, and
    sets that are not a list become five blank slots.

    Args:
        old: Legacy record

    Returns:
        Entry in the current schema
    """
    item = lookup(str(old.get("exercise") or ""))
    sets = old.get("sets")
    if not isinstance(sets, list) or not sets:
        sets = [""] * MAX_SETS
    day = str(old.get("day") or "").strip().upper()
    if day not in DAYS:
        day = DEFAULT_DAY

    return Entry(
        id=str(old.get("id") or new_entry_id()),
        date=str(old.get("date") or today_iso()),
        week=str(old.get("week") or DEFAULT_WEEK),
        day=day,
        exercise=item.identifier,
        exercise_label=item.label,
        weight=str(old.get("weight") or ""),
        sets=[str(s) if s is not None else "" for s in list(sets)[:MAX_SETS]],
        rpe=str(old.get("rpe") or ""),
        notes=str(old.get("notes") or ""),
    )


def entries_to_json(entries: list[Entry]) -> str:
    """Serialize the full collection to a JSON array string."""
    return json.dumps([entry_to_dict(e) for e in entries], ensure_ascii=False)


def parse_entry_records(text: str) -> list[Any]:
    """
    Parse a JSON array of entry records without validating the records.

    Raises:
        ValidationError: If the text is not a JSON array
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise ValidationError(f"Expected a JSON array of entries, got {type(data).__name__}")
    return data
