"""
YAML → CatalogItem loader.

Loads the exercise catalog and the static training plan from the bundled
``src/strength_log/exercises.yaml``.

User overrides: ``~/.strength-log/exercises.yaml`` may list more exercises
under the same ``exercises:`` key.  A user item whose identifier matches a
bundled one is merged over it (only changed keys need to be listed); any
other user item is appended to the catalog after the bundled ones.

Usage (internal, called by registry.py):
    from .loader import load_catalog_from_yaml
    items = load_catalog_from_yaml()   # list or None on failure
"""

from __future__ import annotations

import warnings
from pathlib import Path

from ..config_loader import deep_merge, get_home_dir, load_yaml_file
from .base import CatalogItem, PlanBlock, PlanDay

_REQUIRED_ITEM_FIELDS: frozenset[str] = frozenset(
    {
        "identifier",
        "label",
        "category",
        "unit",
    }
)


def item_from_dict(d: dict) -> CatalogItem:
    """Convert a raw dict (from YAML) to a CatalogItem.

    Raises ValueError if any required field is absent.
    """
    missing = _REQUIRED_ITEM_FIELDS - set(d)
    if missing:
        raise ValueError(f"CatalogItem missing fields: {sorted(missing)}")

    template = d.get("template") or []
    if not isinstance(template, list):
        raise ValueError(f"template must be a list, got {template!r}")

    return CatalogItem(
        identifier=str(d["identifier"]),
        label=str(d["label"]),
        category=str(d["category"]),
        unit=str(d["unit"] or ""),
        template=tuple(str(v) for v in template),
    )


def plan_from_list(raw: list) -> tuple[PlanDay, ...]:
    """Convert the raw ``plan:`` list to PlanDay objects, skipping bad days."""
    days: list[PlanDay] = []
    for d in raw or []:
        if not isinstance(d, dict) or "day" not in d:
            continue
        blocks = tuple(
            PlanBlock(name=str(b.get("name", "")), detail=str(b.get("detail", "")))
            for b in d.get("blocks") or []
            if isinstance(b, dict)
        )
        days.append(PlanDay(day=str(d["day"]), title=str(d.get("title", d["day"])), blocks=blocks))
    return tuple(days)


def get_bundled_catalog_path() -> Path | None:
    """Return path to the bundled exercises.yaml, or None if not found."""
    # loader.py lives at src/strength_log/core/exercises/loader.py
    # three levels up → src/strength_log/
    candidate = Path(__file__).parent.parent.parent / "exercises.yaml"
    return candidate if candidate.is_file() else None


def get_user_catalog_path() -> Path | None:
    """Return ~/.strength-log/exercises.yaml if it exists, else None."""
    p = get_home_dir() / "exercises.yaml"
    return p if p.is_file() else None


def _merge_user_items(bundled: list[dict], user: list[dict]) -> list[dict]:
    merged = [dict(d) for d in bundled]
    index = {str(d.get("identifier")): i for i, d in enumerate(merged)}
    for d in user:
        if not isinstance(d, dict):
            continue
        key = str(d.get("identifier"))
        if key in index:
            merged[index[key]] = deep_merge(merged[index[key]], d)
        else:
            index[key] = len(merged)
            merged.append(dict(d))
    return merged


def load_catalog_from_yaml(
    bundled_path: Path | None = None,
    user_path: Path | None = None,
) -> list[CatalogItem] | None:
    """Return catalog items in declaration order.

    Items with a missing field are skipped with a warning.  Returns None
    (rather than raising) when nothing could be loaded so the registry can
    report a single clear startup error.
    """
    bundled_path = bundled_path or get_bundled_catalog_path()
    user_path = user_path or get_user_catalog_path()

    raw_items: list[dict] = []
    if bundled_path is not None:
        raw_items = list(load_yaml_file(bundled_path).get("exercises") or [])
    if user_path is not None:
        raw_items = _merge_user_items(raw_items, list(load_yaml_file(user_path).get("exercises") or []))

    items: list[CatalogItem] = []
    seen: set[str] = set()
    for raw in raw_items:
        if not isinstance(raw, dict):
            continue
        try:
            item = item_from_dict(raw)
        except ValueError as exc:
            warnings.warn(
                f"strength-log: skipping exercise {raw.get('identifier')!r}: {exc}",
                stacklevel=2,
            )
            continue
        if item.identifier in seen:
            warnings.warn(
                f"strength-log: duplicate exercise identifier {item.identifier!r} ignored",
                stacklevel=2,
            )
            continue
        seen.add(item.identifier)
        items.append(item)

    return items if items else None


def load_plan_from_yaml(bundled_path: Path | None = None) -> tuple[PlanDay, ...]:
    """Return the static A/B plan description (empty if absent)."""
    bundled_path = bundled_path or get_bundled_catalog_path()
    if bundled_path is None:
        return ()
    return plan_from_list(load_yaml_file(bundled_path).get("plan") or [])
