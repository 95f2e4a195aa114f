from typing import Union

from fastapi import APIRouter, Depends

from app.api.failures import failure_response
from app.deps.common import get_store, get_trace_id
from core.store import VideoStore
from service.creator_service import get_creator_profile
from service.dto import CreatorResponseDTO, FailureResponseDTO
from service.errors import ServiceError

router = APIRouter(tags=["creators"])


@router.get("/creators/{creator_id}", response_model=Union[CreatorResponseDTO, FailureResponseDTO])
def get_creator(
    creator_id: str,
    store: VideoStore = Depends(get_store),
    trace_id: str = Depends(get_trace_id),
):
    """Creator profile with video count, total views and total likes"""
    try:
        return CreatorResponseDTO(creator=get_creator_profile(store, creator_id))
    except ServiceError as e:
        return failure_response(e, trace_id)
