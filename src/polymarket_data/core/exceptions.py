"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NetworkError(AppError):
    """Raised when a remote fetch fails at the transport or HTTP level."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason, code="NETWORK_ERROR")


class DecodeError(AppError):
    """Raised when a payload does not match the expected shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason, code="DECODE_ERROR")


class InvalidRequestError(AppError):
    """Raised when request parameters cannot form a valid request."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason, code="INVALID_REQUEST")
