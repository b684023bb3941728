"""
Remote entry store client.

The remote store is reached over the ``/api/entries`` JSON endpoint:

    GET    /api/entries?week=&day=   → {"ok": true, "data": [entry, ...]}
    POST   /api/entries              → {"ok": true}   (insert-or-replace by id)
    DELETE /api/entries?id=<id>      → {"ok": true}   (idempotent)

Any failure is raised as a RemoteError subclass; deciding what to do about
it (offline fallback) is up to the caller.
"""

import logging
from typing import Any, NoReturn, Protocol

import requests

from ..core.config import ENTRIES_ENDPOINT, DEFAULT_TIMEOUT_SECONDS
from ..core.models import Entry
from .errors import MissingIdentifierError, TransportError
from .serializers import ValidationError, dict_to_entry, entry_to_dict, validate_entry

_LOGGER = logging.getLogger(__name__)


class RemoteStore(Protocol):
    """Capability the sync engine needs from a remote store."""

    def list_entries(self, week: str | None = None, day: str | None = None) -> list[Entry]:
        ...

    def upsert(self, entry: Entry) -> None:
        ...

    def delete(self, entry_id: str) -> None:
        ...


def require_entry_id(entry_id: Any) -> str:
    """
    Validate an id passed to delete.

    Raises:
        MissingIdentifierError: If the id is absent, blank or not a string
    """
    if not isinstance(entry_id, str) or not entry_id.strip():
        raise MissingIdentifierError(f"Entry id required, got {entry_id!r}")
    return entry_id


class HttpRemote:
    """Simple REST client for the entries API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{ENTRIES_ENDPOINT}"

    def _request(self, method: str, **kwargs: Any) -> dict[str, Any]:
        try:
            resp = self.session.request(method, self.url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as e:
            raise TransportError(f"{method} {self.url} failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"{method} {self.url} returned invalid JSON: {e}") from e

        if not isinstance(body, dict) or not body.get("ok"):
            error = body.get("error") if isinstance(body, dict) else body
            raise TransportError(f"{method} {self.url} reported failure: {error}")
        _LOGGER.debug("%s %s ok", method, self.url)
        return body

    def list_entries(self, week: str | None = None, day: str | None = None) -> list[Entry]:
        """
        Fetch entries, newest date first.

        Args:
            week: Only this week (None = any)
            day: Only this day (None = any)

        Raises:
            TransportError: If the request fails
            ValidationError: If a returned record is malformed
        """
        params = {k: v for k, v in (("week", week), ("day", day)) if v}
        body = self._request("GET", params=params)
        data = body.get("data")
        if not isinstance(data, list):
            raise ValidationError(f"Expected a list of entries, got {type(data).__name__}")
        return [dict_to_entry(record) for record in data]

    def upsert(self, entry: Entry) -> None:
        """
        Insert or replace an entry by id.

        Raises:
            ValidationError: If the entry is malformed (nothing is sent)
            TransportError: If the request fails
        """
        validate_entry(entry)
        self._request("POST", json=entry_to_dict(entry))

    def delete(self, entry_id: str) -> None:
        """
        Delete an entry by id (succeeds if it is already gone).

        Raises:
            MissingIdentifierError: If entry_id is unusable (nothing is sent)
            TransportError: If the request fails
        """
        require_entry_id(entry_id)
        self._request("DELETE", params={"id": entry_id})


class NullRemote:
    """Remote used when no endpoint is configured: every call fails."""

    def _fail(self) -> NoReturn:
        raise TransportError("remote storage not configured")

    def list_entries(self, week: str | None = None, day: str | None = None) -> list[Entry]:
        self._fail()

    def upsert(self, entry: Entry) -> None:
        validate_entry(entry)
        self._fail()

    def delete(self, entry_id: str) -> None:
        require_entry_id(entry_id)
        self._fail()
