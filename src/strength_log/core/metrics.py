"""
Training metrics derived from the entry collection.

All functions are pure: they read entries and return new values without
touching the collection.  Volume is an approximate load figure
(weight × total reps); entries measured in seconds or meters are summed
as if they were reps, without unit conversion.
"""

from .config import FILTER_ALL
from .exercises.registry import expected_set_slots, lookup
from .models import Entry, EntryFilter, ExerciseProgress


def parse_number(value: str | None) -> float:
    """
    Parse a free-form numeric field.

    Args:
        value: e.g. "60", "62.5", "", "n/a"

    Returns:
        The number, or 0.0 for blank or non-numeric input
    """
    if value is None:
        return 0.0
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0.0
    # nan/inf typed by hand count as nothing
    if number != number or number in (float("inf"), float("-inf")):
        return 0.0
    return number


def filter_entries(
    entries: list[Entry],
    week: str = FILTER_ALL,
    day: str = FILTER_ALL,
    query: str = "",
) -> list[Entry]:
    """
    Select the entries matching the display filters, preserving order.

    Args:
        entries: Full collection
        week: Exact week to keep, or "all"
        day: Exact day to keep, or "all"
        query: Case-insensitive substring of "<label> <notes>" ("" = any)

    Returns:
        New list; the input list is not modified
    """
    needle = query.lower() if query else ""
    selected: list[Entry] = []
    for e in entries:
        if week != FILTER_ALL and str(e.week) != str(week):
            continue
        if day != FILTER_ALL and e.day != day:
            continue
        if needle and needle not in f"{e.exercise_label} {e.notes or ''}".lower():
            continue
        selected.append(e)
    return selected


def apply_filter(entries: list[Entry], entry_filter: EntryFilter) -> list[Entry]:
    """filter_entries() driven by an EntryFilter."""
    return filter_entries(entries, entry_filter.week, entry_filter.day, entry_filter.query)


def entry_total_reps(entry: Entry) -> float:
    """Sum of all set values of an entry (blank/non-numeric sets count 0)."""
    return sum(parse_number(s) for s in entry.sets)


def entry_volume(entry: Entry) -> float:
    """Weight × total reps of one entry."""
    return parse_number(entry.weight) * entry_total_reps(entry)


def total_volume(entries: list[Entry]) -> float:
    """
    Total approximate volume (kg·rep) of a list of entries.

    Example:
        weight "60", sets ["10", "10", "10"] → 1800
    """
    return sum(entry_volume(e) for e in entries)


def completion_percent(entry: Entry) -> float:
    """
    Share of the exercise's expected set slots that hold a value.

    The expected count is the length of the catalog template (5 when the
    exercise has none).  The result is capped at 100.

    Returns:
        Percentage in [0, 100]
    """
    expected = expected_set_slots(entry.exercise)
    filled = sum(1 for s in entry.sets if s and s.strip())
    return min(100.0, 100.0 * filled / expected)


def per_exercise_progress(entries: list[Entry], current_week: str) -> list[ExerciseProgress]:
    """
    Current-week volume per exercise against its best single entry.

    Groups the whole collection by exercise identifier (first-seen order).
    ``best_week_volume`` is the largest volume of any one entry of that
    exercise across all weeks, not a per-week sum.  ``current_week_volume``
    sums the volumes of the entries logged in ``current_week``.

    Args:
        entries: Full collection (not a filtered view)
        current_week: Week to report, e.g. "2"

    Returns:
        One ExerciseProgress per exercise
    """
    groups: dict[str, list[Entry]] = {}
    for e in entries:
        groups.setdefault(e.exercise, []).append(e)

    progress: list[ExerciseProgress] = []
    for exercise, group in groups.items():
        volumes = [entry_volume(e) for e in group]
        current = sum(v for e, v in zip(group, volumes) if str(e.week) == str(current_week))
        label = group[0].exercise_label or lookup(exercise).label
        progress.append(
            ExerciseProgress(
                exercise=exercise,
                label=label,
                current_week_volume=current,
                best_week_volume=max(volumes),
            )
        )
    return progress


def progress_ratio(progress: ExerciseProgress) -> float:
    """Current-week volume as % of the best entry; 0 when there is no best."""
    return progress.ratio
