"""Application exceptions."""

from typing import List, Optional

from mvc_blog.core.response.schemas import ErrorDetail


class AppException(Exception):
    """Base class for errors raised by controllers and views."""

    error_code = "APP_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationException(AppException):
    """Raised when a value or name is rejected."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, detail: str, error_details: Optional[List[ErrorDetail]] = None):
        super().__init__(detail)
        self.error_details = error_details or []


class ViewException(AppException):
    """Raised when a view cannot write to its sink."""

    error_code = "VIEW_ERROR"
