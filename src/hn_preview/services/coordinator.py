"""Wires hover intents to profile resolution and rendering."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hn_preview.domain.geometry import Rect, Viewport
from hn_preview.services.presenter import PopoverPresenter
from hn_preview.services.profiles import ProfileService

_logger = logging.getLogger(__name__)

ViewportProvider = Callable[[], Viewport]


@dataclass
class PopoverCoordinator:
    """Runs the show sequence: loading, cache or fetch, session check, render.

    In-flight resolutions are left running when the hover target changes and
    their results are dropped by the presenter's session check. With
    ``abort_superseded_fetches`` the previous resolution is cancelled instead.
    """

    profile_service: ProfileService
    presenter: PopoverPresenter
    viewport: ViewportProvider
    abort_superseded_fetches: bool = False
    _tasks: set[asyncio.Task[bool]] = field(default_factory=set, init=False, repr=False)
    _inflight: dict[str, asyncio.Task[bool]] = field(
        default_factory=dict, init=False, repr=False
    )

    def show(self, username: str, trigger: Rect) -> asyncio.Task[bool]:
        """Begin a session for ``username`` and resolve it in the background."""
        if self.abort_superseded_fetches:
            self._cancel_superseded(username)
        token = self.presenter.begin(username, trigger, self.viewport())
        task = asyncio.get_running_loop().create_task(self.resolve(username, token))
        self._tasks.add(task)
        self._inflight[username] = task
        task.add_done_callback(lambda done: self._finished(username, done))
        return task

    async def resolve(self, username: str, token: int) -> bool:
        """Resolve a profile and render it if the session is still current."""
        record = await self.profile_service.resolve(username)
        return self.presenter.complete(token, username, record, self.viewport())

    def reanchor(self, username: str, trigger: Rect) -> None:
        self.presenter.reanchor(username, trigger, self.viewport())

    def hide(self) -> None:
        self.presenter.hide()

    async def drain(self) -> None:
        """Wait for every outstanding resolution to settle."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _cancel_superseded(self, username: str) -> None:
        for other, task in list(self._inflight.items()):
            if other != username and not task.done():
                _logger.debug("Cancelling superseded fetch: username=%s", other)
                task.cancel()

    def _finished(self, username: str, task: asyncio.Task[bool]) -> None:
        self._tasks.discard(task)
        if self._inflight.get(username) is task:
            del self._inflight[username]
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.error(
                "Popover resolution failed: username=%s", username, exc_info=exc
            )
