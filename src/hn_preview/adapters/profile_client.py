"""Hacker News profile page client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ProfilePageClient(Protocol):
    """Interface for retrieving raw profile pages."""

    async def get_profile_page(self, username: str) -> str:
        """Fetch the HTML of a user's profile page."""


@dataclass
class HttpxProfilePageClient(ProfilePageClient):
    """HTTPX-backed profile page client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 5.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 5.0
    ) -> "HttpxProfilePageClient":
        """Create a profile client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_profile_page(self, username: str) -> str:
        """Fetch a profile page, raising on non-success statuses."""
        url = f"{self.base_url.rstrip('/')}/user"
        response = await self.http_client.get(
            url,
            params={"id": username},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
