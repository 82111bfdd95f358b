"""Viewport-aware popover placement."""

from hn_preview.domain.geometry import Placement, Rect, Viewport

GAP = 8
VIEWPORT_PADDING = 10


def position(
    trigger: Rect,
    popover_width: float,
    popover_height: float,
    viewport: Viewport,
) -> Placement:
    """Anchor a popover below a trigger, flipping to stay inside the viewport.

    ``trigger`` is in viewport coordinates; the returned placement is in
    document coordinates, so the viewport's scroll offset is added back.
    """
    min_left = viewport.scroll_x + VIEWPORT_PADDING
    max_right = viewport.scroll_x + viewport.width - VIEWPORT_PADDING
    min_top = viewport.scroll_y + VIEWPORT_PADDING
    max_bottom = viewport.scroll_y + viewport.height - VIEWPORT_PADDING

    top = trigger.bottom + viewport.scroll_y + GAP
    left = trigger.left + viewport.scroll_x

    if left + popover_width > max_right:
        left = trigger.right + viewport.scroll_x - popover_width
    left = max(left, min_left)

    if top + popover_height > max_bottom:
        top = trigger.top + viewport.scroll_y - popover_height - GAP
    top = max(top, min_top)

    return Placement(top=top, left=left)
