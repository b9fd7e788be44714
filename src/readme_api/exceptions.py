# src/readme_api/exceptions.py
from typing import Optional


class ReadmeServiceError(Exception):
    """Base class for every error raised by the README service."""


class ConfigurationError(ReadmeServiceError):
    """Raised at startup when required configuration is missing or invalid."""


class RequestValidationError(ReadmeServiceError):
    """Raised when a client request lacks required or well-formed parameters."""


class FetchError(ReadmeServiceError):
    """Raised when a call to the repository host fails at the transport or HTTP level."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DeadlineExceededError(FetchError):
    """Raised when the request deadline expires before the fetches complete."""


class DecodeError(ReadmeServiceError):
    """Raised when a host response cannot be decoded (base64, JSON, missing fields)."""
