"""Theme tokens consumed by the popover stylesheet."""

import logging
from dataclasses import dataclass

_logger = logging.getLogger(__name__)

DEFAULT_THEME = "darkNavy"


@dataclass(frozen=True)
class ThemeTokens:
    """Colors the popover stylesheet references."""

    background: str
    text: str
    link: str
    accent: str
    karma: str


THEMES: dict[str, ThemeTokens] = {
    "darkNavy": ThemeTokens(
        background="#2d3848",
        text="#dddddd",
        link="#9facbe",
        accent="#bb86fc",
        karma="#ededed",
    ),
    "blackTheme": ThemeTokens(
        background="#1f1f1f",
        text="#e0e0e0",
        link="#828282",
        accent="#bb86fc",
        karma="#ffffff",
    ),
}


def resolve_theme(name: str | None) -> ThemeTokens:
    """Return the tokens for a theme, defaulting to darkNavy."""
    if name in THEMES:
        return THEMES[name]
    _logger.warning("Invalid theme %r, defaulting to %s", name, DEFAULT_THEME)
    return THEMES[DEFAULT_THEME]


def popover_stylesheet(tokens: ThemeTokens, width: int = 320) -> str:
    """Generate the popover CSS for a set of theme tokens."""
    return f"""
.hn-profile-popover {{
  --hn-popover-background: {tokens.background};
  --hn-popover-text: {tokens.text};
  --hn-popover-link: {tokens.link};
  --hn-popover-accent: {tokens.accent};
  --hn-popover-karma: {tokens.karma};
  position: absolute;
  z-index: 10000;
  width: {width}px;
  padding: 10px 12px;
  border: 1px solid var(--hn-popover-accent);
  border-radius: 6px;
  background-color: var(--hn-popover-background);
  color: var(--hn-popover-text);
  display: none;
}}

.hn-profile-popover.visible {{
  display: block;
}}

.hn-profile-popover a {{
  color: var(--hn-popover-link) !important;
}}

.hn-profile-popover .hn-popover-username {{
  color: var(--hn-popover-accent);
  font-weight: bold;
}}

.hn-profile-popover .karma {{
  color: var(--hn-popover-karma);
  float: right;
  font-weight: 500;
}}
""".strip()
