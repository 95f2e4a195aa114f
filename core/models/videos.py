from datetime import datetime, timezone
from typing import List, Union

from pydantic import Field

from .base import RecordModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Comment(RecordModel):
    """Comment attached to a single video"""

    id: str
    username: str = "Anonymous"
    text: str
    timestamp: datetime = Field(default_factory=utc_now)


class Video(RecordModel):
    """Video record as persisted in the data file"""

    id: str
    title: str = ""
    description: str = ""
    topic: str = ""
    skill_level: str = ""
    creator_id: str = ""
    video_url: str = ""
    thumbnail: str = ""
    # seconds in seed data, "m:ss" for uploads
    duration: Union[int, str] = 0
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    comments: List[Comment] = Field(default_factory=list)
