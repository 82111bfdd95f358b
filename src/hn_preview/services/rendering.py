"""Markup for the popover render states."""

from html import escape

from hn_preview.domain.views import ContentView, ErrorView, LoadingView, PopoverView


def render_view(view: PopoverView) -> str:
    """Render a popover state to its inner markup."""
    if isinstance(view, LoadingView):
        return (
            '<div class="hn-popover-loading">'
            '<span class="hn-popover-spinner"></span>'
            f"Loading {escape(view.username)}&hellip;"
            "</div>"
        )
    if isinstance(view, ErrorView):
        return (
            '<div class="hn-popover-error">'
            f"Profile unavailable for <b>{escape(view.username)}</b>"
            "</div>"
        )
    if isinstance(view, ContentView):
        return _render_content(view)
    raise TypeError(f"Unsupported popover view: {view!r}")


def _render_content(view: ContentView) -> str:
    record = view.record
    parts = [
        '<div class="hn-popover-header">',
        f'<span class="hn-popover-username">{escape(record.username)}</span>',
        f'<span class="karma">{record.karma:,}</span>',
        "</div>",
    ]
    if record.join_date:
        parts.append(
            f'<div class="hn-popover-created">joined {escape(record.join_date)}</div>'
        )
    if record.about_markup:
        # about text arrives sanitized by the site and is rendered as-is
        parts.append(f'<div class="hn-popover-about">{record.about_markup}</div>')
    parts.append(
        '<div class="hn-popover-links">'
        f'<a href="{escape(record.submissions_url)}">submissions</a> | '
        f'<a href="{escape(record.comments_url)}">comments</a>'
        "</div>"
    )
    return "".join(parts)
