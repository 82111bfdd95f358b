"""Translate raw pointer events into hover events."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, Protocol

from hn_preview.config import parse_username
from hn_preview.domain.geometry import Rect

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventTarget:
    """The element a pointer event refers to."""

    href: str | None = None
    is_surface: bool = False
    rect: Rect | None = None


@dataclass(frozen=True)
class PointerEvent:
    """A capture-phase pointer enter or leave seen on the document body."""

    kind: Literal["enter", "leave"]
    target: EventTarget | None
    related_target: EventTarget | None = None


class HoverListener(Protocol):
    """Receives hover events for profile links and the popover surface."""

    def link_entered(self, username: str, rect: Rect) -> None:
        """The pointer entered a profile link."""

    def link_left(self, username: str, onto_surface: bool) -> None:
        """The pointer left a profile link."""

    def surface_entered(self) -> None:
        """The pointer entered the popover surface."""

    def surface_left(self, onto_link: bool) -> None:
        """The pointer left the popover surface."""


@dataclass
class HoverEventRouter:
    """Delegated pointer handling for profile links and the popover."""

    listeners: list[HoverListener] = field(default_factory=list)

    def subscribe(self, listener: HoverListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: PointerEvent) -> None:
        """Route a raw pointer event to the matching hover event."""
        target = event.target
        if target is None:
            return
        related = event.related_target
        if target.is_surface:
            if event.kind == "enter":
                self._emit(lambda listener: listener.surface_entered())
            else:
                onto_link = related is not None and _username(related) is not None
                self._emit(lambda listener: listener.surface_left(onto_link))
            return

        username = _username(target)
        if username is None:
            return
        if event.kind == "enter":
            if target.rect is None:
                _logger.debug("Ignoring profile link without geometry: %s", username)
                return
            rect = target.rect
            self._emit(lambda listener: listener.link_entered(username, rect))
        else:
            onto_surface = related is not None and related.is_surface
            self._emit(lambda listener: listener.link_left(username, onto_surface))

    def _emit(self, call: Callable[[HoverListener], None]) -> None:
        for listener in list(self.listeners):
            call(listener)


def _username(target: EventTarget) -> str | None:
    return parse_username(target.href)
