"""Response envelope builders."""

from typing import List, Optional

from pydantic import BaseModel

from mvc_blog.core.exceptions import AppException, ValidationException
from mvc_blog.core.response.schemas import BaseResponse, ErrorDetail, ErrorResponse


def success_response(data: Optional[BaseModel] = None, message: Optional[str] = None) -> BaseResponse:
    """Wrap data in a success envelope."""
    if data is None:
        return BaseResponse(success=True, message=message)
    return BaseResponse[type(data)](success=True, message=message, data=data)  # type: ignore


def error_response(
    error_code: str,
    message: str,
    details: Optional[List[ErrorDetail]] = None,
) -> ErrorResponse:
    """Build an error envelope."""
    return ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=details or [],
    )


def exception_response(exc: AppException) -> ErrorResponse:
    """Translate an application exception into an error envelope."""
    details = exc.error_details if isinstance(exc, ValidationException) else None
    return error_response(error_code=exc.error_code, message=exc.detail, details=details)
