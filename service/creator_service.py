"""Creator profiles with stats derived from the video collection"""
import logging

from core.models import CreatorWithStats
from core.store import VideoStore
from service.errors import NotFoundError

logger = logging.getLogger(__name__)


def get_creator_profile(store: VideoStore, creator_id: str) -> CreatorWithStats:
    """
    Look up a creator and attach video count, total views and total likes.

    Scans every video on each call; nothing is cached or persisted.

    Raises:
        NotFoundError: Creator does not exist
    """
    creator = store.find_creator(creator_id)
    if creator is None:
        raise NotFoundError("Creator not found")

    videos = [v for v in store.videos if v.creator_id == creator_id]

    logger.info("Creator profile computed", extra={
        "creator_id": creator_id,
        "videos_count": len(videos)
    })

    return CreatorWithStats(**{
        **creator.model_dump(),
        "videos_count": len(videos),
        "total_views": sum(v.views for v in videos),
        "total_likes": sum(v.likes for v in videos),
    })
