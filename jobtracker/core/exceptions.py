"""
Application error hierarchy.

Every error carries a human-readable message, a machine-readable code and the
HTTP status the error translator answers with.
"""

from typing import Optional


class AppError(Exception):
    """Base class for all errors surfaced to API clients"""

    status_code: int = 500
    default_code: str = "UNKNOWN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class AuthenticationError(AppError):
    """Missing or invalid bearer credential"""
    status_code = 401
    default_code = "AUTHENTICATION_ERROR"


class AuthorizationError(AppError):
    """Authenticated, but not allowed to perform this operation"""
    status_code = 403
    default_code = "AUTHORIZATION_ERROR"


class NotFoundError(AppError):
    """Requested entity does not exist"""
    status_code = 404
    default_code = "NOT_FOUND"


class ValidationError(AppError):
    """Request input violates the schema"""
    status_code = 400
    default_code = "VALIDATION_ERROR"


class ConflictError(AppError):
    """Entity already exists"""
    status_code = 409
    default_code = "CONFLICT"


class UnknownError(AppError):
    """Anything that is not one of the above"""
    status_code = 500
    default_code = "UNKNOWN_ERROR"
