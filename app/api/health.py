"""Liveness endpoint used by the front-end on page load"""
from fastapi import APIRouter

from service.dto import HealthResponseDTO
from service.health_service import get_health

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponseDTO)
def health_check() -> HealthResponseDTO:
    """Report that the video API is up, with server time and API version"""
    return get_health()
