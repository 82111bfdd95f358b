"""Owns the popover surface and guards it against stale results."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from hn_preview.domain.geometry import Placement, Rect, Viewport
from hn_preview.domain.profiles import ProfileRecord
from hn_preview.domain.views import ContentView, ErrorView, LoadingView, PopoverView
from hn_preview.services.positioning import position
from hn_preview.services.rendering import render_view

_logger = logging.getLogger(__name__)


class PopoverSurface(Protocol):
    """The single overlay element the popover is drawn into."""

    def set_markup(self, markup: str) -> None:
        """Replace the element's inner markup."""

    def set_visible(self, visible: bool) -> None:
        """Toggle the element's visibility flag."""

    def move_to(self, top: float, left: float) -> None:
        """Move the element to document coordinates."""

    def measure_height(self) -> float:
        """Return the rendered height of the element."""


@dataclass
class PopoverPresenter:
    """Renders Loading, Content and Error states into one surface.

    ``session`` is the username the active hover asked for. Each ``begin``
    issues a new token; results carrying an older token must not reach the
    surface, even for the same username.
    """

    surface: PopoverSurface
    width: int = 320
    estimated_height: int = 120
    session: str | None = None
    trigger: Rect | None = field(default=None, init=False)
    view: PopoverView | None = field(default=None, init=False)
    _token: int = field(default=0, init=False, repr=False)

    def begin(self, username: str, trigger: Rect, viewport: Viewport) -> int:
        """Start a session: show the loading state at an estimated placement."""
        self._token += 1
        self.session = username
        self.trigger = trigger
        self._render(LoadingView(username))
        self.surface.set_visible(True)
        self.place(trigger, viewport, height=self.estimated_height)
        return self._token

    def is_current(self, token: int) -> bool:
        return self.session is not None and self._token == token

    def complete(
        self,
        token: int,
        username: str,
        record: ProfileRecord | None,
        viewport: Viewport,
    ) -> bool:
        """Render a resolved result if its session is still current."""
        if not self.is_current(token) or self.trigger is None:
            _logger.debug(
                "Discarding stale result: username=%s session=%s",
                username,
                self.session,
            )
            return False
        if record is None:
            self._render(ErrorView(username))
        else:
            self._render(ContentView(record))
        self.place(self.trigger, viewport)
        return True

    def reanchor(self, username: str, trigger: Rect, viewport: Viewport) -> bool:
        """Move the current popover to another link for the same user."""
        if self.session != username:
            return False
        self.trigger = trigger
        self.place(trigger, viewport)
        return True

    def place(
        self, trigger: Rect, viewport: Viewport, height: float | None = None
    ) -> Placement:
        """Position the surface, measuring it unless a height is given."""
        if height is None:
            height = self.surface.measure_height()
        placement = position(trigger, self.width, height, viewport)
        self.surface.move_to(placement.top, placement.left)
        return placement

    def hide(self) -> None:
        """Hide the surface and end the session."""
        self.session = None
        self.surface.set_visible(False)

    def _render(self, view: PopoverView) -> None:
        self.view = view
        self.surface.set_markup(render_view(view))
