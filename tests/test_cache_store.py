"""
Tests for the JSON-file entry cache, including the legacy key upgrade.
"""

import json

from strength_log.core.config import CACHE_KEY, LEGACY_CACHE_KEY
from strength_log.io.cache_store import EntryCache
from strength_log.io.serializers import entry_to_dict

from conftest import make_entry


class TestEntryCache:
    def test_empty_when_nothing_cached(self, tmp_path):
        assert EntryCache(tmp_path / "cache").load_entries() == []

    def test_save_and_load(self, tmp_path):
        cache = EntryCache(tmp_path / "cache")
        entries = [make_entry("a"), make_entry("b", notes="ok")]
        cache.save_entries(entries)
        assert cache.path_for(CACHE_KEY).exists()
        assert cache.load_entries() == entries

    def test_save_overwrites(self, tmp_path):
        cache = EntryCache(tmp_path)
        cache.save_entries([make_entry("a")])
        cache.save_entries([])
        assert cache.load_entries() == []

    def test_no_temp_file_left(self, tmp_path):
        cache = EntryCache(tmp_path)
        cache.save_entries([make_entry()])
        assert [p.name for p in tmp_path.iterdir()] == [f"{CACHE_KEY}.json"]

    def test_corrupt_file_reads_empty(self, tmp_path):
        cache = EntryCache(tmp_path)
        cache.write(CACHE_KEY, "{not json")
        assert cache.load_entries() == []

    def test_invalid_record_skipped(self, tmp_path):
        cache = EntryCache(tmp_path)
        good = entry_to_dict(make_entry("good"))
        bad = dict(good, id="bad", day="Z")
        cache.write(CACHE_KEY, json.dumps([good, bad]))
        assert [e.id for e in cache.load_entries()] == ["good"]


class TestLegacyMigration:
    def _write_legacy(self, cache, records):
        cache.write(LEGACY_CACHE_KEY, json.dumps(records))

    def test_legacy_records_are_upgraded(self, tmp_path):
        cache = EntryCache(tmp_path)
        self._write_legacy(cache, [
            {"id": "o1", "date": "2025-10-01", "week": "1", "day": "A",
             "exercise": "Hip Thrust", "weight": "50", "sets": ["10", "10", "10"]},
        ])
        (e,) = cache.load_entries()
        assert (e.id, e.exercise, e.exercise_label) == ("o1", "HT", "Hip Thrust")

    def test_upgrade_is_written_forward(self, tmp_path):
        cache = EntryCache(tmp_path)
        self._write_legacy(cache, [{"id": "o1", "exercise": "NORDIC"}])
        cache.load_entries()
        stored = json.loads(cache.read(CACHE_KEY))
        assert stored[0]["exerciseLabel"] == "Eccentric Nordic Curl"
        assert cache.read(LEGACY_CACHE_KEY) is not None

    def test_current_key_wins(self, tmp_path):
        cache = EntryCache(tmp_path)
        cache.save_entries([make_entry("current")])
        self._write_legacy(cache, [{"id": "old", "exercise": "HT"}])
        assert [e.id for e in cache.load_entries()] == ["current"]

    def test_odd_legacy_day_survives_second_load(self, tmp_path):
        """Records written forward under the current key still load next time."""
        cache = EntryCache(tmp_path)
        self._write_legacy(cache, [
            {"id": "o1", "exercise": "HT", "day": "C"},
            {"id": "o2", "exercise": "HT", "day": "b", "sets": "10"},
        ])
        first = cache.load_entries()
        second = EntryCache(tmp_path).load_entries()
        assert second == first
        assert [(e.id, e.day) for e in second] == [("o1", "A"), ("o2", "B")]

    def test_corrupt_legacy_reads_empty(self, tmp_path):
        cache = EntryCache(tmp_path)
        cache.write(LEGACY_CACHE_KEY, "[[[")
        assert cache.load_entries() == []
