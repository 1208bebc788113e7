from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel

ApplicationStatus = Literal[
    "Applied",
    "Viewed",
    "Rejected",
    "Gave up",
    "Interviewing",
    "Expired",
    "Saved",
]
APPLICATION_STATUSES: tuple[str, ...] = get_args(ApplicationStatus)


class JobPosting(BaseModel):
    """Fields scraped from a job posting page. Unmatched fields stay empty."""

    url: str
    title: str = ""
    company: str = ""
    location: str = ""
