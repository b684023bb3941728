"""
Tests for the exercise catalog: bundled YAML, lookup and templates.
"""

import warnings

import pytest

from strength_log.core.exercises import (
    CATALOG,
    TRAINING_PLAN,
    CatalogItem,
    expected_set_slots,
    is_known,
    list_grouped_by_category,
    lookup,
    template_sets,
)
from strength_log.core.exercises.loader import (
    get_bundled_catalog_path,
    item_from_dict,
    load_catalog_from_yaml,
    load_plan_from_yaml,
)


class TestBundledCatalog:
    def test_has_twenty_exercises(self):
        assert len(CATALOG) == 20

    def test_identifiers_unique(self):
        ids = [item.identifier for item in CATALOG]
        assert len(ids) == len(set(ids))

    def test_category_order(self):
        """Categories appear in the order of their first exercise."""
        assert list(list_grouped_by_category()) == [
            "Basics 5x5",
            "Secondary",
            "Core",
            "Hamstrings",
            "Glute Medius",
            "Calves",
            "Plyometrics",
            "Technique",
        ]

    def test_exercise_order_within_category(self):
        grouped = list_grouped_by_category()
        assert [i.identifier for i in grouped["Basics 5x5"]] == ["PMR1P", "SB5X5"]
        assert [i.identifier for i in grouped["Calves"]] == ["SOLEO", "CALF_EXC"]

    def test_plan_has_both_days(self):
        assert [d.day for d in TRAINING_PLAN] == ["A", "B"]
        assert all(d.blocks for d in TRAINING_PLAN)


class TestLookup:
    def test_by_identifier(self):
        item = lookup("HT")
        assert item.label == "Hip Thrust"
        assert item.category == "Secondary"

    def test_by_label(self):
        assert lookup("Hip Thrust").identifier == "HT"

    def test_unknown_value_is_ad_hoc(self):
        item = lookup("Sled Push")
        assert item == CatalogItem(identifier="Sled Push", label="Sled Push", category="Other", unit="")
        assert not is_known("Sled Push")

    def test_empty_value(self):
        assert lookup("").identifier == ""

    def test_is_known(self):
        assert is_known("NORDIC")
        assert not is_known("Eccentric Nordic Curl")


class TestTemplates:
    def test_padded_to_five(self):
        assert template_sets("HT") == ["10", "10", "10", "", ""]

    def test_five_set_template(self):
        assert template_sets("PMR1P") == ["5"] * 5

    def test_unknown_is_blank(self):
        assert template_sets("MYSTERY") == [""] * 5

    @pytest.mark.parametrize("exercise, slots", [("HT", 3), ("SB5X5", 5), ("MYSTERY", 5)])
    def test_expected_slots(self, exercise, slots):
        assert expected_set_slots(exercise) == slots


class TestLoader:
    def test_item_from_dict_missing_field(self):
        with pytest.raises(ValueError, match="missing fields"):
            item_from_dict({"identifier": "X", "label": "X"})

    def test_item_from_dict_stringifies_template(self):
        item = item_from_dict({"identifier": "X", "label": "X", "category": "C", "unit": None, "template": [8, 8]})
        assert item.template == ("8", "8")
        assert item.unit == ""

    def test_user_file_overrides_and_appends(self, isolated_home, tmp_path):
        user = tmp_path / "user.yaml"
        user.write_text(
            "exercises:\n"
            "  - identifier: HT\n"
            "    label: Barbell Hip Thrust\n"
            "  - identifier: SLED\n"
            "    label: Sled Push\n"
            "    category: Conditioning\n"
            "    unit: m\n"
            "    template: [20, 20]\n",
            encoding="utf-8",
        )
        items = load_catalog_from_yaml(get_bundled_catalog_path(), user)
        by_id = {i.identifier: i for i in items}
        assert by_id["HT"].label == "Barbell Hip Thrust"
        assert by_id["HT"].category == "Secondary"
        assert items[-1].identifier == "SLED"
        assert items[-1].template == ("20", "20")

    def test_bad_item_is_skipped_with_warning(self, isolated_home, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "exercises:\n"
            "  - identifier: OK\n"
            "    label: Ok\n"
            "    category: C\n"
            "    unit: reps\n"
            "  - identifier: BROKEN\n",
            encoding="utf-8",
        )
        with pytest.warns(UserWarning, match="BROKEN"):
            items = load_catalog_from_yaml(path)
        assert [i.identifier for i in items] == ["OK"]

    def test_nothing_loadable_returns_none(self, isolated_home, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("exercises: []\n", encoding="utf-8")
        assert load_catalog_from_yaml(path) is None

    def test_unparseable_file_warns(self, isolated_home, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("exercises: [\n", encoding="utf-8")
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert load_catalog_from_yaml(path) is None
        assert any("ignoring" in str(w.message) for w in caught)

    def test_plan_loaded(self):
        plan = load_plan_from_yaml()
        assert plan[0].title.startswith("Day A")
