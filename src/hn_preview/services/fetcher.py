"""Profile fetching with a hard deadline and failure collapsing."""

import asyncio
import logging
from dataclasses import dataclass

from hn_preview.adapters.profile_client import ProfilePageClient
from hn_preview.domain.profiles import ProfileRecord
from hn_preview.services.profile_parser import parse_profile_page

_logger = logging.getLogger(__name__)


@dataclass
class ProfileFetcher:
    """Retrieves and parses profile pages.

    Every failure (HTTP status, network error, timeout, malformed page)
    collapses into ``None``. Nothing is retried.
    """

    client: ProfilePageClient
    base_url: str = "https://news.ycombinator.com"
    timeout_seconds: float = 5.0

    async def fetch(self, username: str) -> ProfileRecord | None:
        """Fetch and parse the profile page for ``username``."""
        try:
            html = await asyncio.wait_for(
                self.client.get_profile_page(username),
                timeout=self.timeout_seconds,
            )
            record = parse_profile_page(html, username, base_url=self.base_url)
        except Exception as exc:
            _logger.warning(
                "Profile fetch failed: username=%s status=%s error=%r",
                username,
                _status_code_from_exception(exc),
                exc,
            )
            return None
        if record is None:
            _logger.warning("Profile page malformed: username=%s", username)
        return record


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
