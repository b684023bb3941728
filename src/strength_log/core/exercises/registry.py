"""
Exercise catalog registry.

All known exercises are loaded here once, at import time, from the bundled
``exercises.yaml`` (plus ``~/.strength-log/exercises.yaml`` if present).
If no exercise can be loaded a RuntimeError is raised: the application
cannot start without a catalog.

Use lookup() to resolve an identifier or display label.  Unknown values
never fail: they resolve to an ad hoc item so every entry stays displayable.
"""

from ..config import FALLBACK_SET_SLOTS, MAX_SETS, UNKNOWN_CATEGORY
from .base import CatalogItem, PlanDay


def _build_catalog() -> tuple[CatalogItem, ...]:
    from .loader import load_catalog_from_yaml

    loaded = load_catalog_from_yaml()
    if not loaded:
        raise RuntimeError(
            "strength-log: no exercises could be loaded from YAML. "
            "Check that src/strength_log/exercises.yaml is present and valid."
        )
    return tuple(loaded)


def _build_plan() -> tuple[PlanDay, ...]:
    from .loader import load_plan_from_yaml

    return load_plan_from_yaml()


CATALOG: tuple[CatalogItem, ...] = _build_catalog()
TRAINING_PLAN: tuple[PlanDay, ...] = _build_plan()

_BY_IDENTIFIER: dict[str, CatalogItem] = {item.identifier: item for item in CATALOG}
_BY_LABEL: dict[str, CatalogItem] = {}
for _item in CATALOG:
    _BY_LABEL.setdefault(_item.label, _item)


def is_known(identifier: str) -> bool:
    """True if identifier names a catalog exercise."""
    return identifier in _BY_IDENTIFIER


def lookup(identifier_or_label: str) -> CatalogItem:
    """
    Resolve a catalog item by identifier, then by exact label.

    Args:
        identifier_or_label: e.g. "HT" or "Hip Thrust"

    Returns:
        The matching CatalogItem, or an ad hoc item whose identifier and
        label are both the input (category "Other", no unit, no template)
    """
    value = identifier_or_label or ""
    item = _BY_IDENTIFIER.get(value) or _BY_LABEL.get(value)
    if item is not None:
        return item
    return CatalogItem(identifier=value, label=value, category=UNKNOWN_CATEGORY, unit="")


def list_grouped_by_category(
    items: tuple[CatalogItem, ...] | list[CatalogItem] = CATALOG,
) -> dict[str, list[CatalogItem]]:
    """Group items by category, keeping declaration order of both."""
    grouped: dict[str, list[CatalogItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def template_sets(identifier_or_label: str) -> list[str]:
    """Default set values for a new entry, padded with "" to MAX_SETS slots."""
    template = list(lookup(identifier_or_label).template[:MAX_SETS])
    return template + [""] * (MAX_SETS - len(template))


def expected_set_slots(identifier_or_label: str) -> int:
    """Number of set slots an entry of this exercise is expected to fill."""
    n = len(lookup(identifier_or_label).template[:MAX_SETS])
    return max(1, n) if n else FALLBACK_SET_SLOTS
