"""Pydantic response models for the preview API."""

from pydantic import BaseModel

from hn_preview.domain.profiles import ProfileRecord


class ProfileResponse(BaseModel):
    """Profile details as returned to the page script."""

    username: str
    join_date: str
    karma: int
    about_markup: str
    submissions_url: str
    comments_url: str

    @classmethod
    def from_record(cls, record: ProfileRecord) -> "ProfileResponse":
        return cls(
            username=record.username,
            join_date=record.join_date,
            karma=record.karma,
            about_markup=record.about_markup,
            submissions_url=record.submissions_url,
            comments_url=record.comments_url,
        )
