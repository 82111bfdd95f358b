"""Cache-first profile lookup."""

import logging
from dataclasses import dataclass

from hn_preview.domain.profiles import ProfileRecord
from hn_preview.services.cache import Cache
from hn_preview.services.fetcher import ProfileFetcher

_logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """Resolves profiles from the cache, falling back to the fetcher."""

    fetcher: ProfileFetcher
    cache: Cache

    async def resolve(self, username: str) -> ProfileRecord | None:
        """Return a profile record, or None if it is unavailable."""
        cached = self.cache.get(username)
        if cached is not None:
            _logger.debug("Profile cache hit: username=%s", username)
            return cached

        record = await self.fetcher.fetch(username)
        if record is not None:
            self.cache.put(username, record)
        return record
