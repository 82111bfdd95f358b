"""Geometry models used for popover placement."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Bounding box of a trigger link in viewport coordinates."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Viewport:
    """Visible window size and its scroll offset in the document."""

    width: float
    height: float
    scroll_x: float = 0.0
    scroll_y: float = 0.0


@dataclass(frozen=True)
class Placement:
    """Popover coordinates in document space."""

    top: float
    left: float
