"""Video and comment operations over the video store"""
import logging
import time
import uuid
from typing import List, Optional
from urllib.parse import quote

from core.config import AppSettings
from core.models import Comment, Video
from core.models.videos import utc_now
from core.store import VideoStore
from player.classifier import classify
from player.render import render_player
from service.dto import (
    CommentCreateDTO,
    PlayerResponseDTO,
    VideoFilterDTO,
    VideoUploadDTO,
)
from service.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Video"
DEFAULT_TOPIC = "Programming"
DEFAULT_SKILL_LEVEL = "Beginner"
DEFAULT_DURATION = "1:30"
DEFAULT_USERNAME = "Anonymous"


def _matches(video: Video, filters: VideoFilterDTO) -> bool:
    if filters.topic and video.topic.lower() != filters.topic.lower():
        return False
    if filters.skill_level and video.skill_level.lower() != filters.skill_level.lower():
        return False
    if filters.search:
        term = filters.search.lower()
        if term not in video.title.lower() and term not in video.description.lower():
            return False
    return True


def list_videos(store: VideoStore, filters: Optional[VideoFilterDTO] = None) -> List[Video]:
    """
    List videos matching every given filter.

    Topic and skill level are case-insensitive exact matches; search is a
    case-insensitive substring of the title or the description. Empty
    filter values are ignored. Collection order is kept (newest upload
    first).
    """
    filters = filters or VideoFilterDTO()
    return [v for v in store.videos if _matches(v, filters)]


def get_video(store: VideoStore, video_id: str) -> Video:
    video = store.find_video(video_id)
    if video is None:
        raise NotFoundError("Video not found")
    return video


def _new_video_id(store: VideoStore) -> str:
    candidate = int(time.time() * 1000)
    existing = {v.id for v in store.videos}
    while str(candidate) in existing:
        candidate += 1
    return str(candidate)


def _placeholder_thumbnail(settings: AppSettings, title: Optional[str]) -> str:
    return f"{settings.thumbnail_placeholder_url}?text={quote(title or 'Video', safe='')}"


def upload_video(store: VideoStore, dto: VideoUploadDTO, settings: AppSettings) -> Video:
    """
    Create a video from an uploaded URL and persist it.

    Args:
        store: Video store
        dto: Upload fields; only video_url is required
        settings: Supplies the default creator and thumbnail base URL

    Returns:
        Video: The created record, placed first in the collection

    Raises:
        ValidationError: video_url missing or blank
    """
    video_url = (dto.video_url or "").strip()
    if not video_url:
        raise ValidationError("Video URL is required")

    with store.mutation() as state:
        video = Video(
            id=_new_video_id(store),
            title=dto.title or DEFAULT_TITLE,
            description=dto.description or "",
            topic=dto.topic or DEFAULT_TOPIC,
            skill_level=dto.skill_level or DEFAULT_SKILL_LEVEL,
            creator_id=dto.creator_id or settings.default_creator_id,
            video_url=video_url,
            thumbnail=_placeholder_thumbnail(settings, dto.title),
            duration=DEFAULT_DURATION,
            views=0,
            likes=0,
            created_at=utc_now(),
            comments=[],
        )
        state.videos.insert(0, video)

    logger.info("Video saved", extra={
        "video_id": video.id,
        "total_videos": len(store.videos)
    })
    return video


def like_video(store: VideoStore, video_id: str) -> int:
    """Increment likes by one and return the new count"""
    with store.mutation():
        video = get_video(store, video_id)
        video.likes += 1
        likes = video.likes

    logger.info("Video liked", extra={"video_id": video_id, "likes": likes})
    return likes


def list_comments(store: VideoStore, video_id: str) -> List[Comment]:
    """Comments of a video; empty when the video does not exist"""
    video = store.find_video(video_id)
    if video is None:
        return []
    return list(video.comments)


def post_comment(store: VideoStore, video_id: str, dto: CommentCreateDTO) -> List[Comment]:
    """
    Append a comment and return the full comment list of the video.

    Raises:
        NotFoundError: Video does not exist
        ValidationError: Text missing or blank
    """
    text = (dto.text or "").strip()

    with store.mutation():
        video = get_video(store, video_id)
        if not text:
            raise ValidationError("Comment cannot be empty")

        existing = {c.id for c in video.comments}
        comment_id = str(uuid.uuid4())
        while comment_id in existing:
            comment_id = str(uuid.uuid4())

        video.comments.append(Comment(
            id=comment_id,
            username=(dto.username or "").strip() or DEFAULT_USERNAME,
            text=text,
            timestamp=utc_now(),
        ))
        comments = list(video.comments)

    logger.info("Comment added to video", extra={"video_id": video_id})
    return comments


def get_video_player(store: VideoStore, video_id: str) -> PlayerResponseDTO:
    """Classify the stored video URL and render its player"""
    video = get_video(store, video_id)
    return build_player(video.video_url)


def build_player(url: str) -> PlayerResponseDTO:
    descriptor = classify(url)
    return PlayerResponseDTO(player=descriptor, html=render_player(descriptor))
