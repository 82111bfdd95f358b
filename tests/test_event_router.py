"""Tests for hover event delegation."""

from dataclasses import dataclass, field

from hn_preview.config import parse_username
from hn_preview.domain.geometry import Rect
from hn_preview.services.events import EventTarget, HoverEventRouter, PointerEvent

RECT = Rect(left=0, top=0, right=40, bottom=12)
LINK = EventTarget(href="user?id=alice", rect=RECT)
OTHER_LINK = EventTarget(href="item?id=123", rect=RECT)
SURFACE = EventTarget(is_surface=True)


@dataclass
class RecordingListener:
    events: list[tuple] = field(default_factory=list)

    def link_entered(self, username: str, rect: Rect) -> None:
        self.events.append(("link_entered", username))

    def link_left(self, username: str, onto_surface: bool) -> None:
        self.events.append(("link_left", username, onto_surface))

    def surface_entered(self) -> None:
        self.events.append(("surface_entered",))

    def surface_left(self, onto_link: bool) -> None:
        self.events.append(("surface_left", onto_link))


def _router() -> tuple[HoverEventRouter, RecordingListener]:
    router = HoverEventRouter()
    listener = RecordingListener()
    router.subscribe(listener)
    return router, listener


def test_profile_link_events_are_routed() -> None:
    router, listener = _router()

    router.dispatch(PointerEvent("enter", LINK))
    router.dispatch(PointerEvent("leave", LINK, related_target=SURFACE))
    router.dispatch(PointerEvent("leave", LINK, related_target=None))

    assert listener.events == [
        ("link_entered", "alice"),
        ("link_left", "alice", True),
        ("link_left", "alice", False),
    ]


def test_surface_events_are_routed() -> None:
    router, listener = _router()

    router.dispatch(PointerEvent("enter", SURFACE))
    router.dispatch(PointerEvent("leave", SURFACE, related_target=LINK))
    router.dispatch(PointerEvent("leave", SURFACE, related_target=OTHER_LINK))

    assert listener.events == [
        ("surface_entered",),
        ("surface_left", True),
        ("surface_left", False),
    ]


def test_unrelated_targets_are_ignored() -> None:
    router, listener = _router()

    router.dispatch(PointerEvent("enter", OTHER_LINK))
    router.dispatch(PointerEvent("enter", EventTarget(href=None)))
    router.dispatch(PointerEvent("enter", None))
    router.dispatch(PointerEvent("enter", EventTarget(href="/user?id=alice", rect=RECT)))

    assert listener.events == []


def test_unsubscribe_stops_delivery() -> None:
    router = HoverEventRouter()
    listener = RecordingListener()
    unsubscribe = router.subscribe(listener)

    unsubscribe()
    router.dispatch(PointerEvent("enter", LINK))

    assert listener.events == []


def test_parse_username() -> None:
    assert parse_username("user?id=pg") == "pg"
    assert parse_username("user?id=pg&x=1") == "pg"
    assert parse_username("user?id=") is None
    assert parse_username("threads?id=pg") is None
    assert parse_username(None) is None
