"""Common dependencies for FastAPI dependency injection"""
import uuid
from datetime import datetime, timezone

from fastapi import Request

from core.config import AppSettings, get_settings
from core.store import VideoStore


def get_store(request: Request) -> VideoStore:
    """
    Video store dependency.

    The store is opened once in the application lifespan and shared by
    every request.

    Returns:
        VideoStore: Process-wide store
    """
    return request.app.state.store


def get_trace_id() -> str:
    """
    Generate unique trace ID for request tracking.

    Returns:
        str: Unique trace ID
    """
    return f"api_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"


def get_app_settings() -> AppSettings:
    return get_settings()
