"""Shared test fixtures."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from hn_preview.adapters.html_surface import InMemoryHtmlSurface
from hn_preview.adapters.profile_client import ProfilePageClient
from hn_preview.config import Settings
from hn_preview.containers import PreviewContainer
from hn_preview.domain.geometry import Rect, Viewport
from hn_preview.domain.profiles import ProfileRecord
from hn_preview.services.cache import ProfileCache
from hn_preview.services.fetcher import ProfileFetcher
from hn_preview.services.profiles import ProfileService
from hn_preview.services.theme import resolve_theme


def profile_page(
    created: str | None = "Jan 1, 2015",
    karma: str | None = "4321",
    about: str | None = "<i>hi</i>",
) -> str:
    """Build a user page shaped like the real site's markup."""
    rows = ['<tr class="athing"><td valign="top">user:</td><td>someone</td></tr>']
    if created is not None:
        rows.append(
            '<tr><td valign="top">created:</td>'
            f'<td><a href="front?day=2015-01-01&amp;birth=someone">{created}</a></td></tr>'
        )
    if karma is not None:
        rows.append(f'<tr><td valign="top">karma:</td><td>\n{karma}          </td></tr>')
    if about is not None:
        rows.append(
            '<tr><td valign="top">about:</td>'
            f'<td style="overflow:hidden;">{about}</td></tr>'
        )
    inner = "".join(rows)
    return (
        "<html><head><title>Profile</title></head><body>"
        '<center><table id="hnmain" border="0" cellpadding="0" cellspacing="0">'
        '<tr><td bgcolor="#ff6600"><span class="pagetop">Hacker News</span></td></tr>'
        '<tr><td><table border="0">'
        f"{inner}"
        "</table></td></tr>"
        "</table></center></body></html>"
    )


def make_record(username: str, karma: int = 10) -> ProfileRecord:
    return ProfileRecord(
        username=username,
        join_date="Jan 1, 2015",
        karma=karma,
        about_markup="",
        submissions_url=f"https://news.ycombinator.com/submitted?id={username}",
        comments_url=f"https://news.ycombinator.com/threads?id={username}",
    )


@dataclass
class FakeProfilePageClient(ProfilePageClient):
    """Serves canned pages; usernames with a gate wait until it is opened."""

    pages: dict[str, str] = field(default_factory=dict)
    gates: dict[str, asyncio.Event] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def gate(self, username: str) -> asyncio.Event:
        event = asyncio.Event()
        self.gates[username] = event
        return event

    async def get_profile_page(self, username: str) -> str:
        self.calls.append(username)
        gate = self.gates.get(username)
        if gate is not None:
            await gate.wait()
        if username not in self.pages:
            raise LookupError(f"no page for {username}")
        return self.pages[username]


@dataclass
class _ManualHandle:
    due_ms: int
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Scheduler harness whose clock only moves when advanced."""

    now_ms: int = 0
    handles: list[_ManualHandle] = field(default_factory=list)

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> _ManualHandle:
        handle = _ManualHandle(self.now_ms + round(delay_seconds * 1000), callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[_ManualHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [h for h in self.pending if h.due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due_ms)
            self.now_ms = handle.due_ms
            handle.fired = True
            handle.callback()
        self.now_ms = target


@pytest.fixture(autouse=True)
def _reset_app_logger() -> None:
    logger = logging.getLogger("hn_preview")
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings(profile_base_url="https://news.test", theme="darkNavy")


@pytest.fixture
def page_client() -> FakeProfilePageClient:
    return FakeProfilePageClient(
        pages={
            "alice": profile_page(created="Jan 1, 2015", karma="4321"),
            "bob": profile_page(created="Mar 3, 2010", karma="77", about=None),
        }
    )


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def surface() -> InMemoryHtmlSurface:
    return InMemoryHtmlSurface()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(width=1000, height=800)


@pytest.fixture
def link_rect() -> Rect:
    return Rect(left=100, top=50, right=140, bottom=65)


@pytest.fixture
def container(
    settings: Settings, page_client: FakeProfilePageClient
) -> PreviewContainer:
    profile_cache = ProfileCache(
        ttl_seconds=settings.cache_ttl_seconds,
        max_entries=settings.cache_max_entries,
    )
    profile_fetcher = ProfileFetcher(
        client=page_client,
        base_url=settings.profile_base_url,
        timeout_seconds=settings.fetch_timeout_seconds,
    )

    async def close_resources() -> None:
        return None

    return PreviewContainer(
        settings=settings,
        profile_cache=profile_cache,
        profile_fetcher=profile_fetcher,
        profile_service=ProfileService(fetcher=profile_fetcher, cache=profile_cache),
        theme=resolve_theme(settings.theme),
        close_resources=close_resources,
    )
