"""
Configuration constants for the strength log.

All fixed parameters of the 4-week A/B plan, the entry schema limits and
the persistence keys are centralized here.
"""

from typing import Final

# =============================================================================
# PLAN STRUCTURE
# =============================================================================

WEEKS: Final[tuple[str, ...]] = ("1", "2", "3", "4")
DAYS: Final[tuple[str, ...]] = ("A", "B")

DEFAULT_WEEK: Final[str] = "1"
DEFAULT_DAY: Final[str] = "A"

FILTER_ALL: Final[str] = "all"  # Wildcard for week/day filters

# =============================================================================
# ENTRY SCHEMA
# =============================================================================

MAX_SETS: Final[int] = 5  # Set slots per entry (form and CSV)
FALLBACK_SET_SLOTS: Final[int] = 5  # Expected slots when an exercise has no template

UNKNOWN_CATEGORY: Final[str] = "Other"  # Category of ad hoc exercises

ENTRY_ID_LENGTH: Final[int] = 8

# =============================================================================
# PERSISTENCE
# =============================================================================

CACHE_KEY: Final[str] = "strength-log-v2"
LEGACY_CACHE_KEY: Final[str] = "strength-log-v1"  # Schema without exerciseLabel

ENTRIES_ENDPOINT: Final[str] = "/api/entries"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0

# =============================================================================
# CSV INTERCHANGE
# =============================================================================

CSV_HEADER: Final[tuple[str, ...]] = (
    "date",
    "week",
    "day",
    "exercise",
    "exerciseLabel",
    "weight",
    "set1",
    "set2",
    "set3",
    "set4",
    "set5",
    "rpe",
    "notes",
)

EXPORT_FILENAME_PREFIX: Final[str] = "strength_log"
