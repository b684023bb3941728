"""
Data models for strength-log.

Entries are stored exactly as entered: numeric fields stay strings so
that blank or partially typed values survive every persistence path.
"""

from dataclasses import dataclass, field
from enum import Enum

from .config import FILTER_ALL


class SyncMode(str, Enum):
    """Persistence mode of one session."""

    LOADING = "loading"
    ONLINE = "online"
    OFFLINE = "offline"


@dataclass
class Entry:
    """
    One logged set-group for one exercise on one day.

    ``id`` is the identity and merge key; every other field is user-editable.
    ``sets`` holds up to five reps/seconds/meters values and is never padded
    in storage.
    """

    id: str
    date: str  # ISO format: YYYY-MM-DD
    week: str  # "1".."4"
    day: str  # "A" | "B"
    exercise: str  # catalog identifier, or free text for custom exercises
    exercise_label: str
    weight: str = ""
    sets: list[str] = field(default_factory=list)
    rpe: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class EntryFilter:
    """Display filter over the entry collection."""

    week: str = FILTER_ALL
    day: str = FILTER_ALL
    query: str = ""


@dataclass(frozen=True)
class ExerciseProgress:
    """Volume of one exercise in the current week against its best entry."""

    exercise: str
    label: str
    current_week_volume: float
    best_week_volume: float

    @property
    def ratio(self) -> float:
        """Current volume as a percentage of the best entry (0 when no best)."""
        if self.best_week_volume <= 0:
            return 0.0
        return 100.0 * self.current_week_volume / self.best_week_volume
