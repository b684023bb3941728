"""
Base types for the exercise catalog.

CatalogItem describes one exercise the log knows about: how it is shown,
which unit its load is measured in, and the default set template that
pre-fills a new entry.  PlanDay holds the static description of one
training day of the 4-week plan.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogItem:
    """One exercise of the catalog."""

    identifier: str       # e.g. "HT"
    label: str            # e.g. "Hip Thrust"
    category: str         # e.g. "Secondary"
    unit: str             # "kg" | "s" | "m" | "reps" | ... ("" for ad hoc exercises)
    template: tuple[str, ...] = ()  # default value per set, in set order


@dataclass(frozen=True)
class PlanBlock:
    """One block (plyometrics, main lift, ...) of a training day."""

    name: str
    detail: str


@dataclass(frozen=True)
class PlanDay:
    """Static description of training day A or B."""

    day: str
    title: str
    blocks: tuple[PlanBlock, ...] = field(default_factory=tuple)
