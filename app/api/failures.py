import logging

from service.dto import FailureResponseDTO
from service.errors import ServiceError

logger = logging.getLogger(__name__)


def failure_response(error: ServiceError, trace_id: str) -> FailureResponseDTO:
    """Log a rejected request and build the flat failure body (HTTP 200)"""
    logger.warning("Request rejected", extra={
        "trace_id": trace_id,
        "error_code": error.code,
        "error": error.message
    })
    return FailureResponseDTO(message=error.message, code=error.code)
