"""Profile cache with lazy expiry and insertion-order eviction."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from hn_preview.domain.profiles import ProfileRecord

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class Cache(Protocol):
    """Cache interface for profile records."""

    def get(self, username: str) -> ProfileRecord | None:
        """Return a cached record if present and not expired."""

    def put(self, username: str, record: ProfileRecord) -> None:
        """Store a record for a username."""


@dataclass
class _CacheEntry:
    record: ProfileRecord
    inserted_at: datetime


class ProfileCache(Cache):
    """Bounded in-memory profile cache.

    Entries expire ``ttl_seconds`` after insertion and are purged when read.
    Once the store holds more than ``max_entries`` records, the earliest
    inserted entry is evicted, regardless of how recently it was read.
    """

    def __init__(
        self,
        ttl_seconds: int = 300,
        max_entries: int = 100,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.ttl = timedelta(seconds=ttl_seconds)
        self.max_entries = max_entries
        self._now = now
        self._entries: dict[str, _CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, username: object) -> bool:
        return username in self._entries

    def get(self, username: str) -> ProfileRecord | None:
        """Return a cached record if it hasn't expired."""
        entry = self._entries.get(username)
        if entry is None:
            return None
        if self._now() - entry.inserted_at > self.ttl:
            self._entries.pop(username, None)
            return None
        return entry.record

    def put(self, username: str, record: ProfileRecord) -> None:
        """Store a record, evicting the oldest insertion past capacity."""
        self._entries.pop(username, None)
        self._entries[username] = _CacheEntry(record=record, inserted_at=self._now())
        if len(self._entries) > self.max_entries:
            oldest = next(iter(self._entries))
            self._entries.pop(oldest)
            _logger.debug("Profile cache evicted %s", oldest)
