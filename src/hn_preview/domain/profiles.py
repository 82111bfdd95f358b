"""Profile domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileRecord:
    """Profile details scraped from a user page."""

    username: str
    join_date: str
    karma: int
    about_markup: str
    submissions_url: str
    comments_url: str
