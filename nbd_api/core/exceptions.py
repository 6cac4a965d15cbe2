# ============================================================================
# FILE: nbd_api/core/exceptions.py
# ============================================================================
"""
Application error classes.

Each exception carries the HTTP status code it maps to. The handler
registered in main.py renders them as {"error": message}.
"""


class AppException(Exception):
    """Base exception for all API errors"""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidInput(AppException):
    """Missing or malformed request fields"""
    status_code = 400


class InvalidToken(AppException):
    """Unknown, expired or already used password reset token"""
    status_code = 400


class Unauthorized(AppException):
    """No valid session for an endpoint that needs one"""
    status_code = 401

    def __init__(self, message: str = "You must be logged in"):
        super().__init__(message)


class NotFound(AppException):
    status_code = 404


class InternalError(AppException):
    """Unexpected failure; message is the generic one shown to callers"""
    status_code = 500
