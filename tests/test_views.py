"""
Rendering tests for the Rich views.

Stored fields are free text, so anything that looks like Rich markup
must be printed literally.
"""

import pytest
from rich.console import Console

from strength_log.cli import views
from strength_log.core.models import ExerciseProgress

from conftest import make_entry


@pytest.fixture
def console():
    return Console(record=True, width=200)


class TestEntryTable:
    @pytest.mark.parametrize("field", ["id", "date", "week", "day", "exercise_label", "weight", "rpe", "notes"])
    def test_markup_is_printed_literally(self, console, field):
        entry = make_entry(**{"entry_id" if field == "id" else field: "[/x]"})
        console.print(views.format_entry_table([entry]))
        assert "[/x]" in console.export_text()

    def test_short_sets_are_padded(self, console):
        console.print(views.format_entry_table([make_entry(sets=["7"])]))
        text = console.export_text()
        assert "7" in text
        assert "S5" in text


class TestProgressTable:
    def test_ratio_is_clamped(self, console):
        p = ExerciseProgress(exercise="HT", label="[b]Hip[/b]", current_week_volume=300, best_week_volume=100)
        console.print(views.format_progress_table([p], "2"))
        text = console.export_text()
        assert "100%" in text
        assert "[b]Hip[/b]" in text
