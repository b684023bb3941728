"""
JSON-file local cache for the entry collection.

The cache is a small key/value store: one ``<key>.json`` file per key in
the cache directory.  The current key holds the whole collection as a
JSON array; the legacy key from the previous schema is read only when the
current one is missing, and its records are migrated forward.
"""

import logging
from pathlib import Path

from ..core.config import CACHE_KEY, LEGACY_CACHE_KEY
from ..core.models import Entry
from .serializers import (
    ValidationError,
    dict_to_entry,
    entries_to_json,
    migrate_legacy,
    parse_entry_records,
)

_LOGGER = logging.getLogger(__name__)


class EntryCache:
    """
    Manages the locally cached entry collection.

    Every save overwrites the whole collection; there is exactly one
    writer (the running session) so no locking is done.
    """

    def __init__(self, cache_dir: str | Path):
        """
        Initialize the cache.

        Args:
            cache_dir: Directory holding the cache files (created on first write)
        """
        self.cache_dir = Path(cache_dir)

    def path_for(self, key: str) -> Path:
        """Return the file backing a cache key."""
        return self.cache_dir / f"{key}.json"

    def read(self, key: str) -> str | None:
        """Return the raw value stored under key, or None if absent."""
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path_for(key), "w", encoding="utf-8") as f:
            f.write(value)

    def load_entries(self) -> list[Entry]:
        """
        Load the cached collection.

        Falls back to the legacy key when the current key is absent; legacy
        records are migrated and written forward under the current key.
        A corrupt file is logged and treated as empty; a single invalid
        record in the current key is logged and skipped.

        Returns:
            Cached entries in stored order (empty if nothing is cached)
        """
        raw = self.read(CACHE_KEY)
        if raw is not None:
            return self._parse_current(raw)

        legacy = self.read(LEGACY_CACHE_KEY)
        if legacy is None:
            return []

        entries = self._parse_legacy(legacy)
        self.save_entries(entries)
        _LOGGER.info("Migrated %d cached entries from %s to %s", len(entries), LEGACY_CACHE_KEY, CACHE_KEY)
        return entries

    def save_entries(self, entries: list[Entry]) -> None:
        """
        Write the full collection under the current key.

        Args:
            entries: Collection to store
        """
        self.write(CACHE_KEY, entries_to_json(entries))
        _LOGGER.debug("Cached %d entries in %s", len(entries), self.path_for(CACHE_KEY))

    def _parse_current(self, raw: str) -> list[Entry]:
        try:
            records = parse_entry_records(raw)
        except ValidationError as e:
            _LOGGER.warning("Ignoring unreadable cache %s: %s", self.path_for(CACHE_KEY), e)
            return []

        entries: list[Entry] = []
        for i, record in enumerate(records, 1):
            try:
                entries.append(dict_to_entry(record))
            except ValidationError as e:
                _LOGGER.warning("Skipping cached record %d: %s", i, e)
        return entries

    def _parse_legacy(self, raw: str) -> list[Entry]:
        try:
            records = parse_entry_records(raw)
        except ValidationError as e:
            _LOGGER.warning("Ignoring unreadable legacy cache %s: %s", self.path_for(LEGACY_CACHE_KEY), e)
            return []
        return [migrate_legacy(r) for r in records if isinstance(r, dict)]
