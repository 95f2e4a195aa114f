import logging
from typing import Optional, Union

from fastapi import APIRouter, Body, Depends

from app.api.failures import failure_response
from app.deps.common import get_app_settings, get_store, get_trace_id
from core.config import AppSettings
from core.store import VideoStore
from service import video_service
from service.dto import (
    CommentCreateDTO,
    CommentListResponseDTO,
    FailureResponseDTO,
    LikeResponseDTO,
    PlayerResponseDTO,
    VideoFilterDTO,
    VideoListResponseDTO,
    VideoResponseDTO,
    VideoUploadDTO,
)
from service.errors import ServiceError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["videos"])


@router.get("/videos", response_model=VideoListResponseDTO)
def list_videos(
    topic: Optional[str] = None,
    skill_level: Optional[str] = None,
    search: Optional[str] = None,
    store: VideoStore = Depends(get_store),
) -> VideoListResponseDTO:
    """List videos, optionally filtered by topic, skill level and search text"""
    filters = VideoFilterDTO(topic=topic, skill_level=skill_level, search=search)
    return VideoListResponseDTO(videos=video_service.list_videos(store, filters))


@router.get("/videos/{video_id}", response_model=Union[VideoResponseDTO, FailureResponseDTO])
def get_video(
    video_id: str,
    store: VideoStore = Depends(get_store),
    trace_id: str = Depends(get_trace_id),
):
    try:
        return VideoResponseDTO(video=video_service.get_video(store, video_id))
    except ServiceError as e:
        return failure_response(e, trace_id)


@router.post("/videos/upload", response_model=Union[VideoResponseDTO, FailureResponseDTO])
def upload_video(
    request: Optional[VideoUploadDTO] = Body(default=None),
    store: VideoStore = Depends(get_store),
    settings: AppSettings = Depends(get_app_settings),
    trace_id: str = Depends(get_trace_id),
):
    """Create a video record from a URL"""
    request = request or VideoUploadDTO()
    logger.info("Video upload request received", extra={
        "trace_id": trace_id,
        "title": request.title,
        "video_url": request.video_url
    })

    try:
        video = video_service.upload_video(store, request, settings)
    except ServiceError as e:
        return failure_response(e, trace_id)

    return VideoResponseDTO(message="Video uploaded successfully", video=video)


@router.post("/videos/{video_id}/like", response_model=Union[LikeResponseDTO, FailureResponseDTO])
def like_video(
    video_id: str,
    store: VideoStore = Depends(get_store),
    trace_id: str = Depends(get_trace_id),
):
    try:
        return LikeResponseDTO(likes=video_service.like_video(store, video_id))
    except ServiceError as e:
        return failure_response(e, trace_id)


@router.get("/videos/{video_id}/comments", response_model=CommentListResponseDTO)
def list_comments(
    video_id: str,
    store: VideoStore = Depends(get_store),
) -> CommentListResponseDTO:
    return CommentListResponseDTO(comments=video_service.list_comments(store, video_id))


@router.post("/videos/{video_id}/comment", response_model=Union[CommentListResponseDTO, FailureResponseDTO])
def post_comment(
    video_id: str,
    request: Optional[CommentCreateDTO] = Body(default=None),
    store: VideoStore = Depends(get_store),
    trace_id: str = Depends(get_trace_id),
):
    try:
        comments = video_service.post_comment(store, video_id, request or CommentCreateDTO())
    except ServiceError as e:
        return failure_response(e, trace_id)

    return CommentListResponseDTO(comments=comments)


@router.get("/videos/{video_id}/player", response_model=Union[PlayerResponseDTO, FailureResponseDTO])
def get_video_player(
    video_id: str,
    store: VideoStore = Depends(get_store),
    trace_id: str = Depends(get_trace_id),
):
    """Player descriptor and markup for a stored video"""
    try:
        return video_service.get_video_player(store, video_id)
    except ServiceError as e:
        return failure_response(e, trace_id)


@router.get("/player", response_model=PlayerResponseDTO)
def classify_url(url: str = "") -> PlayerResponseDTO:
    """Player descriptor and markup for an arbitrary URL"""
    return video_service.build_player(url)
