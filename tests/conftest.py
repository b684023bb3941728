"""Shared fixtures: in-memory remote and cache doubles, sample entries."""

import pytest

from strength_log.core.models import Entry
from strength_log.io.errors import TransportError
from strength_log.io.remote import require_entry_id
from strength_log.io.serializers import validate_entry


class FakeRemote:
    """In-memory remote store that can be switched to fail every call."""

    def __init__(self, entries=None, fail=False):
        self.stored = {e.id: e for e in (entries or [])}
        self.fail = fail
        self.calls = []

    def _check(self):
        if self.fail:
            raise TransportError("connection refused")

    def list_entries(self, week=None, day=None):
        self.calls.append(("list", week, day))
        self._check()
        return list(self.stored.values())

    def upsert(self, entry):
        self.calls.append(("upsert", entry.id))
        validate_entry(entry)
        self._check()
        self.stored[entry.id] = entry

    def delete(self, entry_id):
        self.calls.append(("delete", entry_id))
        require_entry_id(entry_id)
        self._check()
        self.stored.pop(entry_id, None)


class FakeCache:
    """Cache double recording every save."""

    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.saves = 0

    def load_entries(self):
        return list(self.entries)

    def save_entries(self, entries):
        self.saves += 1
        self.entries = list(entries)


def make_entry(
    entry_id="e1",
    date="2026-03-01",
    week="2",
    day="A",
    exercise="HT",
    exercise_label="Hip Thrust",
    weight="60",
    sets=None,
    rpe="",
    notes="",
) -> Entry:
    return Entry(
        id=entry_id,
        date=date,
        week=week,
        day=day,
        exercise=exercise,
        exercise_label=exercise_label,
        weight=weight,
        sets=list(sets) if sets is not None else ["10", "10", "10", "", ""],
        rpe=rpe,
        notes=notes,
    )


@pytest.fixture
def entry():
    return make_entry()


@pytest.fixture
def fake_cache():
    return FakeCache()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir and clear STRENGTH_LOG_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("STRENGTH_LOG_REMOTE_URL", "STRENGTH_LOG_CACHE_DIR", "STRENGTH_LOG_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
