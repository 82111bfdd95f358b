"""Scrape profile fields out of a user page."""

import re
from dataclasses import dataclass, field
from html import unescape
from html.parser import HTMLParser

from hn_preview.domain.profiles import ProfileRecord

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

SUBMISSIONS_PATH = "/submitted?id={username}"
COMMENTS_PATH = "/threads?id={username}"


@dataclass
class ProfileCell:
    """A table cell with its text, inner markup and first link text."""

    text: str = ""
    markup: str = ""
    anchor_text: str | None = None
    anchor_depth: int = field(default=0, repr=False)
    anchor_buffer: str = field(default="", repr=False)


@dataclass
class _Row:
    cells: list[ProfileCell] = field(default_factory=list)


class ProfileTableParser(HTMLParser):
    """Collects two-column table rows as (label, value cell) pairs.

    Nested tables are supported: markup and text inside an inner table also
    count toward every enclosing cell.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.pairs: list[tuple[str, ProfileCell]] = []
        self._rows: list[_Row] = []
        self._open_cells: list[ProfileCell] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        raw = self.get_starttag_text() or f"<{tag}>"
        if tag == "tr":
            self._append_markup(raw)
            self._rows.append(_Row())
            return
        if tag in {"td", "th"}:
            self._append_markup(raw)
            cell = ProfileCell()
            if self._rows:
                self._rows[-1].cells.append(cell)
            self._open_cells.append(cell)
            return
        self._append_markup(raw)
        if tag == "a" and self._open_cells:
            cell = self._open_cells[-1]
            if cell.anchor_text is None:
                cell.anchor_depth += 1

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._append_markup(self.get_starttag_text() or f"<{tag}/>")

    def handle_endtag(self, tag: str) -> None:
        if tag in {"td", "th"}:
            if self._open_cells:
                self._open_cells.pop()
            self._append_markup(f"</{tag}>")
            return
        if tag == "tr":
            if self._rows:
                row = self._rows.pop()
                if len(row.cells) == 2:
                    label, value = row.cells
                    self.pairs.append((label.text, value))
            self._append_markup(f"</{tag}>")
            return
        if tag == "a" and self._open_cells:
            cell = self._open_cells[-1]
            if cell.anchor_depth:
                cell.anchor_depth -= 1
                if not cell.anchor_depth:
                    cell.anchor_text = cell.anchor_buffer
        self._append_markup(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        self._append_text(data, data)

    def handle_entityref(self, name: str) -> None:
        self._append_text(unescape(f"&{name};"), f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._append_text(unescape(f"&#{name};"), f"&#{name};")

    def _append_markup(self, raw: str) -> None:
        for cell in self._open_cells:
            cell.markup += raw

    def _append_text(self, text: str, raw: str) -> None:
        for cell in self._open_cells:
            cell.text += text
            cell.markup += raw
            if cell.anchor_depth:
                cell.anchor_buffer += text


def parse_karma(value: str) -> int:
    """Parse leading base-10 digits, clamping anything unparsable to 0."""
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def parse_profile_page(
    html: str, username: str, base_url: str = "https://news.ycombinator.com"
) -> ProfileRecord | None:
    """Build a profile record from a user page, or None if it looks malformed."""
    parser = ProfileTableParser()
    parser.feed(html)
    parser.close()

    join_date = ""
    karma = 0
    about_markup = ""
    for label, cell in parser.pairs:
        key = label.strip().lower()
        if key == "created:":
            join_date = (cell.anchor_text or "").strip() or cell.text.strip()
        elif key == "karma:":
            karma = parse_karma(cell.text.strip())
        elif key == "about:":
            about_markup = cell.markup.strip()

    if not join_date and not karma:
        return None

    base = base_url.rstrip("/")
    return ProfileRecord(
        username=username,
        join_date=join_date,
        karma=karma,
        about_markup=about_markup,
        submissions_url=base + SUBMISSIONS_PATH.format(username=username),
        comments_url=base + COMMENTS_PATH.format(username=username),
    )
