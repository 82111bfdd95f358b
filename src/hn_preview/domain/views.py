"""Popover render states."""

from dataclasses import dataclass

from hn_preview.domain.profiles import ProfileRecord


@dataclass(frozen=True)
class LoadingView:
    """Shown while a profile is being resolved."""

    username: str


@dataclass(frozen=True)
class ContentView:
    """Shown once a profile record is available."""

    record: ProfileRecord


@dataclass(frozen=True)
class ErrorView:
    """Shown when a profile could not be retrieved."""

    username: str


PopoverView = LoadingView | ContentView | ErrorView
