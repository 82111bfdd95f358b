"""Headless HTML popover surface."""

import re
from dataclasses import dataclass, field

from hn_preview.domain.geometry import Placement

SURFACE_CLASS = "hn-profile-popover"
VISIBLE_CLASS = "visible"

_BLOCK_TAG = re.compile(r"<(div|p|pre|br)\b", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")


@dataclass
class InMemoryHtmlSurface:
    """Single popover element kept in memory.

    Visibility is a class flag; the element itself is never re-created.
    Height is estimated from the rendered block count and text length.
    """

    width: int = 320
    line_height: int = 18
    chars_per_line: int = 45
    vertical_padding: int = 20
    markup: str = ""
    classes: set[str] = field(default_factory=lambda: {SURFACE_CLASS})
    placement: Placement | None = None
    renders: int = 0

    @property
    def visible(self) -> bool:
        return VISIBLE_CLASS in self.classes

    def set_markup(self, markup: str) -> None:
        self.markup = markup
        self.renders += 1

    def set_visible(self, visible: bool) -> None:
        if visible:
            self.classes.add(VISIBLE_CLASS)
        else:
            self.classes.discard(VISIBLE_CLASS)

    def move_to(self, top: float, left: float) -> None:
        self.placement = Placement(top=top, left=left)

    def measure_height(self) -> float:
        blocks = max(1, len(_BLOCK_TAG.findall(self.markup)))
        text = _TAG.sub("", self.markup)
        wrapped = len(text) // self.chars_per_line
        return self.vertical_padding + (blocks + wrapped) * self.line_height

    def to_html(self) -> str:
        """Render the whole element, as it would sit in the document."""
        style = ""
        if self.placement is not None:
            style = (
                f' style="top: {self.placement.top:g}px; '
                f'left: {self.placement.left:g}px;"'
            )
        class_attr = " ".join(sorted(self.classes))
        return f'<div class="{class_attr}"{style}>{self.markup}</div>'
