"""
CSV interchange for training entries.

Export writes one fully quoted line per entry under a fixed header.
Import locates columns by header name, so files with reordered or
missing columns still load; every imported row becomes a new entry with
a freshly minted id.  A line that cannot be split into fields, or whose
day is not A or B, is skipped and reported, never fatal to the whole
import.
"""

import csv
import re
from dataclasses import dataclass, field

from ..core.config import CSV_HEADER, DAYS, DEFAULT_DAY, DEFAULT_WEEK, EXPORT_FILENAME_PREFIX, MAX_SETS
from ..core.exercises.registry import is_known, lookup
from ..core.models import Entry
from .errors import MalformedRowError
from .serializers import new_entry_id, today_iso

_LINE_SPLIT = re.compile(r"\r?\n")
_NEWLINES = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class SkippedRow:
    """A CSV line that could not be imported."""

    line_number: int  # 1-based, counting the header line
    reason: str


@dataclass
class ImportResult:
    """Outcome of a CSV import: parsed entries in file order plus skipped lines."""

    entries: list[Entry] = field(default_factory=list)
    skipped: list[SkippedRow] = field(default_factory=list)


def entry_to_row(entry: Entry) -> list[str]:
    """
    Flatten an entry to the 13 CSV fields, in CSV_HEADER order.

    Sets are truncated/padded to exactly five fields and line breaks in the
    notes are collapsed to a single space.
    """
    sets = [s or "" for s in list(entry.sets)[:MAX_SETS]]
    sets += [""] * (MAX_SETS - len(sets))
    return [
        entry.date,
        entry.week,
        entry.day,
        entry.exercise,
        entry.exercise_label,
        entry.weight or "",
        *sets,
        entry.rpe or "",
        _NEWLINES.sub(" ", entry.notes or ""),
    ]


def format_row(fields: list[str] | tuple[str, ...]) -> str:
    """Quote every field (doubling embedded quotes) and join with commas."""
    return ",".join('"' + str(f).replace('"', '""') + '"' for f in fields)


def split_line(raw_line: str) -> list[str]:
    """
    Split one CSV line into unescaped fields.

    Raises:
        MalformedRowError: If the line has unbalanced or misplaced quotes
    """
    try:
        rows = list(csv.reader([raw_line], strict=True))
    except csv.Error as e:
        raise MalformedRowError(f"Cannot parse CSV line: {e}") from e
    return rows[0] if rows else []


def parse_header(raw_line: str) -> list[str]:
    """Return column names of a header line; tolerates a badly quoted header."""
    try:
        names = split_line(raw_line)
    except MalformedRowError:
        names = raw_line.split(",")
    return [n.replace('"', "").strip() for n in names]


def row_to_entry(header: list[str], raw_line: str, *, today: str | None = None) -> Entry:
    """
    Build a new entry from one CSV line.

    Args:
        header: Column names, as returned by parse_header()
        raw_line: The data line
        today: Date used when the row has none (default: today)

    Returns:
        Entry with a fresh id; exercise resolved through the catalog

    Raises:
        MalformedRowError: If the line cannot be tokenized or its day is not A or B
    """
    fields = split_line(raw_line)
    columns: dict[str, int] = {}
    for i, name in enumerate(header):
        columns.setdefault(name, i)

    def get(name: str) -> str:
        i = columns.get(name)
        if i is None or i >= len(fields):
            return ""
        return fields[i]

    label_value = get("exerciseLabel")
    item = lookup(get("exercise") or label_value)
    label = item.label
    if not is_known(item.identifier) and label_value:
        # Custom exercise: keep its own display name
        label = label_value

    day = get("day").strip().upper() or DEFAULT_DAY
    if day not in DAYS:
        raise MalformedRowError(f"Invalid day: {get('day')!r}. Must be one of {DAYS}")

    return Entry(
        id=new_entry_id(),
        date=get("date") or today or today_iso(),
        week=get("week") or DEFAULT_WEEK,
        day=day,
        exercise=item.identifier,
        exercise_label=label,
        weight=get("weight"),
        sets=[get(f"set{i}") for i in range(1, MAX_SETS + 1)],
        rpe=get("rpe"),
        notes=get("notes"),
    )


def export_csv(entries: list[Entry]) -> str:
    """
    Render entries as CSV text (header line first, no trailing newline).

    Args:
        entries: Entries in the order they should appear

    Returns:
        CSV document
    """
    lines = [format_row(CSV_HEADER)]
    lines.extend(format_row(entry_to_row(e)) for e in entries)
    return "\n".join(lines)


def export_filename(today: str | None = None) -> str:
    """File name for an export made today, e.g. strength_log_2026-03-01.csv."""
    return f"{EXPORT_FILENAME_PREFIX}_{today or today_iso()}.csv"


def import_csv(text: str, *, today: str | None = None) -> ImportResult:
    """
    Parse a CSV document into new entries.

    Blank lines are ignored.  The first non-blank line is the header.
    Lines that cannot be parsed are recorded in ``skipped``.

    Args:
        text: CSV document
        today: Date for rows without one (default: today)

    Returns:
        ImportResult with entries in file order
    """
    result = ImportResult()
    numbered = [
        (n, line)
        for n, line in enumerate(_LINE_SPLIT.split(text.lstrip("\ufeff")), 1)
        if line.strip()
    ]
    if not numbered:
        return result

    _, header_line = numbered[0]
    header = parse_header(header_line)

    for line_number, line in numbered[1:]:
        try:
            result.entries.append(row_to_entry(header, line, today=today))
        except MalformedRowError as e:
            result.skipped.append(SkippedRow(line_number=line_number, reason=str(e)))

    return result
