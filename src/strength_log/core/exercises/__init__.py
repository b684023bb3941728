"""
Exercise catalog for strength-log.

Each exercise is described by a CatalogItem loaded from YAML; lookup()
resolves identifiers and labels and never fails.
"""

from .base import CatalogItem, PlanBlock, PlanDay
from .registry import (
    CATALOG,
    TRAINING_PLAN,
    expected_set_slots,
    is_known,
    list_grouped_by_category,
    lookup,
    template_sets,
)

__all__ = [
    "CatalogItem",
    "PlanBlock",
    "PlanDay",
    "CATALOG",
    "TRAINING_PLAN",
    "expected_set_slots",
    "is_known",
    "list_grouped_by_category",
    "lookup",
    "template_sets",
]
