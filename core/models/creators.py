from pydantic import Field

from .base import RecordModel


class Creator(RecordModel):
    """Creator profile as persisted in the data file"""

    id: str
    username: str = ""
    bio: str = ""
    followers: int = Field(default=0, ge=0)
    avatar: str = ""
    email: str = ""
    type: str = "creator"


class CreatorWithStats(Creator):
    """Creator merged with stats derived from the video collection.

    The derived fields are computed on read and never written back.
    """
    videos_count: int = 0
    total_views: int = 0
    total_likes: int = 0
