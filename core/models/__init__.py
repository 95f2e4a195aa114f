"""Core data models"""
from .videos import Comment, Video
from .creators import Creator, CreatorWithStats
from .state import StoreState

__all__ = ["Comment", "Video", "Creator", "CreatorWithStats", "StoreState"]
