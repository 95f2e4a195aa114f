"""Service layer error taxonomy"""
from typing import Optional


class ServiceError(Exception):
    """Base error reported to clients as ``{success: false, message}``"""
    default_code = "SERVICE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ValidationError(ServiceError):
    """Required field missing or blank"""
    default_code = "VALIDATION_FAILED"


class NotFoundError(ServiceError):
    """Referenced video or creator does not exist"""
    default_code = "NOT_FOUND"
