"""Debounced hover intent for profile links."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from hn_preview.domain.geometry import Rect
from hn_preview.services.events import HoverListener
from hn_preview.services.timers import CancellableTimer, Scheduler

_logger = logging.getLogger(__name__)


class HoverState(str, Enum):
    IDLE = "idle"
    PENDING_SHOW = "pending_show"
    VISIBLE = "visible"
    PENDING_HIDE = "pending_hide"


ShowCallback = Callable[[str, Rect], None]
HideCallback = Callable[[], None]
ReanchorCallback = Callable[[str, Rect], None]


@dataclass
class HoverIntentController(HoverListener):
    """Turns link and surface hover events into show and hide intents.

    Owns one show timer and one hide timer. Hovering a different link while
    a popover is up keeps the old popover on screen until the new show timer
    fires. Leaving the link gives a grace period before hiding; leaving the
    popover itself hides at once. Entering another link for the user already
    on screen moves the popover to that link without re-resolving.
    """

    scheduler: Scheduler
    on_show: ShowCallback
    on_hide: HideCallback
    show_delay_ms: int = 300
    hide_delay_ms: int = 150
    on_reanchor: ReanchorCallback | None = None
    state: HoverState = field(default=HoverState.IDLE, init=False)
    pending_username: str | None = field(default=None, init=False)
    visible_username: str | None = field(default=None, init=False)
    _pending_rect: Rect | None = field(default=None, init=False, repr=False)
    _show_timer: CancellableTimer = field(init=False, repr=False)
    _hide_timer: CancellableTimer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._show_timer = CancellableTimer(self.scheduler, self.show_delay_ms, "show")
        self._hide_timer = CancellableTimer(self.scheduler, self.hide_delay_ms, "hide")

    @property
    def show_pending(self) -> bool:
        return self._show_timer.pending

    @property
    def hide_pending(self) -> bool:
        return self._hide_timer.pending

    def link_entered(self, username: str, rect: Rect) -> None:
        self._hide_timer.cancel()
        if self.visible_username == username:
            self._show_timer.cancel()
            self.pending_username = None
            self._pending_rect = None
            self.state = HoverState.VISIBLE
            if self.on_reanchor is not None:
                self.on_reanchor(username, rect)
            return
        self.pending_username = username
        self._pending_rect = rect
        self.state = HoverState.PENDING_SHOW
        self._show_timer.start(self._fire_show)

    def link_left(self, username: str, onto_surface: bool) -> None:
        if self.pending_username == username:
            self._show_timer.cancel()
            self.pending_username = None
            self._pending_rect = None
            if self.visible_username is None:
                self.state = HoverState.IDLE
                return
            self._start_hide()
            return
        if self.visible_username == username and self.state is HoverState.VISIBLE:
            if onto_surface:
                return
            self._start_hide()

    def surface_entered(self) -> None:
        if self.visible_username is None:
            return
        self._hide_timer.cancel()
        if self.state is HoverState.PENDING_HIDE:
            self.state = HoverState.VISIBLE

    def surface_left(self, onto_link: bool) -> None:
        if onto_link or self.visible_username is None:
            return
        self._show_timer.cancel()
        self.pending_username = None
        self._pending_rect = None
        self._hide_now()

    def reset(self) -> None:
        """Cancel both timers and return to idle without calling back."""
        self._show_timer.cancel()
        self._hide_timer.cancel()
        self.pending_username = None
        self.visible_username = None
        self._pending_rect = None
        self.state = HoverState.IDLE

    def _start_hide(self) -> None:
        self.state = HoverState.PENDING_HIDE
        self._hide_timer.start(self._hide_now)

    def _fire_show(self) -> None:
        username = self.pending_username
        rect = self._pending_rect
        if username is None or rect is None:
            return
        self.pending_username = None
        self._pending_rect = None
        self.visible_username = username
        self.state = HoverState.VISIBLE
        _logger.debug("Show intent fired: username=%s", username)
        self.on_show(username, rect)

    def _hide_now(self) -> None:
        self._hide_timer.cancel()
        self.visible_username = None
        self.state = HoverState.IDLE
        _logger.debug("Hide intent fired")
        self.on_hide()
