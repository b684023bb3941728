"""
Session-scoped owner of the entry collection.

SyncEngine keeps the authoritative in-memory list of entries for one
session and writes every change through to a remote store, falling back
to the local cache whenever the remote cannot be reached.

Mode transitions::

    LOADING --initialize()--> ONLINE | OFFLINE
    ONLINE <--any write--> OFFLINE

Local changes are applied before the remote call and are never rolled
back.  While offline, every change rewrites the whole cache; while online
the cache is left alone.  Writes that failed while offline are not
replayed when the remote comes back.
"""

import logging
from typing import Callable, Protocol

from ..io.errors import MissingIdentifierError, RemoteError
from ..io.remote import RemoteStore, require_entry_id
from .models import Entry, SyncMode

_LOGGER = logging.getLogger(__name__)


class EntryCacheStore(Protocol):
    """Capability the sync engine needs from the local cache."""

    def load_entries(self) -> list[Entry]:
        ...

    def save_entries(self, entries: list[Entry]) -> None:
        ...


class SyncEngine:
    """
    Mediates all reads and writes of training entries.

    No RemoteError escapes a public method: failures switch the engine to
    OFFLINE, make the change durable in the cache, and are kept in
    ``last_error``.
    """

    def __init__(self, remote: RemoteStore, cache: EntryCacheStore):
        """
        Args:
            remote: Remote store capability (list/upsert/delete)
            cache: Local cache capability (load/save the whole collection)
        """
        self.remote = remote
        self.cache = cache
        self.mode = SyncMode.LOADING
        self.last_error: str | None = None
        self._entries: list[Entry] = []

    @property
    def entries(self) -> list[Entry]:
        """Copy of the current collection, in display order."""
        return list(self._entries)

    def get(self, entry_id: str) -> Entry | None:
        """Return the entry with this id, or None."""
        for e in self._entries:
            if e.id == entry_id:
                return e
        return None

    def initialize(self) -> tuple[list[Entry], SyncMode]:
        """
        Load the collection from the remote, or from the cache if that fails.

        Returns:
            (entries, mode) after loading
        """
        try:
            self._entries = self.remote.list_entries()
        except RemoteError as e:
            _LOGGER.warning("Remote unavailable, loading local cache: %s", e)
            self.last_error = str(e)
            self._entries = self.cache.load_entries()
            self.mode = SyncMode.OFFLINE
        else:
            self.last_error = None
            self.mode = SyncMode.ONLINE
        _LOGGER.debug("Loaded %d entries (%s)", len(self._entries), self.mode.value)
        return self.entries, self.mode

    def upsert(self, entry: Entry) -> SyncMode:
        """
        Replace the entry with the same id, or prepend it if new.

        Args:
            entry: Complete entry to store

        Returns:
            Mode after the remote write attempt
        """
        for i, existing in enumerate(self._entries):
            if existing.id == entry.id:
                self._entries[i] = entry
                break
        else:
            self._entries.insert(0, entry)

        return self._write_through(lambda: self.remote.upsert(entry), f"upsert {entry.id}")

    def remove(self, entry_id: str) -> SyncMode:
        """
        Remove the entry with this id locally and on the remote.

        A blank or non-string id is rejected before any remote call; the
        collection and the mode are left unchanged.

        Returns:
            Mode after the remote delete attempt
        """
        try:
            require_entry_id(entry_id)
        except MissingIdentifierError as e:
            _LOGGER.warning("Delete rejected: %s", e)
            return self.mode

        self._entries = [e for e in self._entries if e.id != entry_id]
        return self._write_through(lambda: self.remote.delete(entry_id), f"delete {entry_id}")

    def import_entries(self, entries: list[Entry]) -> SyncMode:
        """
        Prepend a batch of new entries (e.g. from a CSV import).

        The batch keeps its own order at the front of the collection.  The
        remote is called once per entry until the first failure.

        Returns:
            Mode after the remote writes
        """
        if not entries:
            return self.mode

        self._entries = list(entries) + self._entries

        def push() -> None:
            for e in entries:
                self.remote.upsert(e)

        return self._write_through(push, f"import of {len(entries)} entries")

    def clear(self) -> SyncMode:
        """
        Remove every entry, locally and on the remote.

        Returns:
            Mode after the remote deletes
        """
        ids = [e.id for e in self._entries]
        self._entries = []

        def push() -> None:
            for entry_id in ids:
                self.remote.delete(entry_id)

        return self._write_through(push, f"clear of {len(ids)} entries")

    def persist_cache_if_offline(self) -> None:
        """Write the whole collection to the cache when offline; no-op online."""
        if self.mode is SyncMode.OFFLINE:
            self.cache.save_entries(self._entries)

    def _write_through(self, call: Callable[[], None], action: str) -> SyncMode:
        try:
            call()
        except RemoteError as e:
            _LOGGER.warning("Remote %s failed, keeping change locally: %s", action, e)
            self.last_error = str(e)
            self.mode = SyncMode.OFFLINE
        else:
            self.last_error = None
            self.mode = SyncMode.ONLINE
        self.persist_cache_if_offline()
        return self.mode
