from typing import List

from pydantic import Field

from .base import RecordModel
from .creators import Creator
from .videos import Video


class StoreState(RecordModel):
    """Whole persisted document: top-level videos and creators.

    Unknown top-level keys (e.g. legacy ``courses``) are kept so a
    load/save cycle does not drop them.
    """

    videos: List[Video] = Field(default_factory=list)
    creators: List[Creator] = Field(default_factory=list)
