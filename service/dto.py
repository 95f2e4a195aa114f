"""Data Transfer Objects for service layer"""
from typing import List, Optional

from pydantic import BaseModel

from core.models import Comment, CreatorWithStats, Video
from player.schemas import PlayerDescriptor


class VideoUploadDTO(BaseModel):
    """Upload request; every field is optional on the wire"""
    title: Optional[str] = None
    description: Optional[str] = None
    topic: Optional[str] = None
    skill_level: Optional[str] = None
    creator_id: Optional[str] = None
    video_url: Optional[str] = None


class CommentCreateDTO(BaseModel):
    """Comment request"""
    username: Optional[str] = None
    text: Optional[str] = None


class VideoFilterDTO(BaseModel):
    """Optional list filters, combined with AND"""
    topic: Optional[str] = None
    skill_level: Optional[str] = None
    search: Optional[str] = None


class FailureResponseDTO(BaseModel):
    """Flat failure shape shared by not-found and validation errors"""
    success: bool = False
    message: str
    code: Optional[str] = None


class HealthResponseDTO(BaseModel):
    """Service layer DTO for health check responses"""
    success: bool = True
    status: str = "success"
    message: str = "Backend is healthy"
    timestamp: Optional[str] = None
    version: Optional[str] = None


class VideoListResponseDTO(BaseModel):
    success: bool = True
    videos: List[Video]


class VideoResponseDTO(BaseModel):
    success: bool = True
    message: Optional[str] = None
    video: Video


class LikeResponseDTO(BaseModel):
    success: bool = True
    likes: int


class CommentListResponseDTO(BaseModel):
    success: bool = True
    comments: List[Comment]


class CreatorResponseDTO(BaseModel):
    success: bool = True
    creator: CreatorWithStats


class PlayerResponseDTO(BaseModel):
    """Player descriptor plus its rendered markup"""
    success: bool = True
    player: PlayerDescriptor
    html: str
