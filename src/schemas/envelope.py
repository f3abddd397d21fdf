"""Response envelope handed to the HTTP boundary.

The boundary wraps every engine result in ``{success, data, error}`` and
maps engine error codes to HTTP statuses. These helpers are the single
place where engine exceptions are translated.
"""

from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from src.schemas.base import EngineModel
from src.utils.error_handling import PromptEngineError
from src.utils.logging_config import get_logger


def _get_logger():
    """Get logger lazily to avoid configuring logging at import time."""
    return get_logger(__name__)


class ApiError(BaseModel):
    """Error payload of a failed response."""

    code: str
    message: str
    details: Optional[Any] = None


class ApiResponse(BaseModel):
    """Uniform response envelope."""

    success: bool
    data: Optional[Any] = None
    error: Optional[ApiError] = None


def success_response(data: Any) -> ApiResponse:
    """Wrap an engine result (or list of results) in a success envelope."""
    if isinstance(data, EngineModel):
        data = data.to_json_dict()
    elif isinstance(data, (list, tuple)):
        data = [item.to_json_dict() if isinstance(item, EngineModel) else item for item in data]
    return ApiResponse(success=True, data=data, error=None)


def error_response(error: Exception) -> tuple[int, ApiResponse]:
    """Translate an exception into an HTTP status and an error envelope.

    Args:
        error: Exception raised while handling a request

    Returns:
        Tuple of (HTTP status code, envelope)
    """
    if isinstance(error, PromptEngineError):
        status_code = error.status_code
        payload = ApiError(**error.to_dict())
    elif isinstance(error, ValidationError):
        status_code = 400
        payload = ApiError(
            code="VALIDATION_ERROR",
            message="Invalid request",
            details=error.errors(include_url=False, include_context=False),
        )
    else:
        _get_logger().error("Unhandled error: %s", error, exc_info=error)
        status_code = 500
        payload = ApiError(code="INTERNAL_ERROR", message="Internal server error")

    return status_code, ApiResponse(success=False, data=None, error=payload)
