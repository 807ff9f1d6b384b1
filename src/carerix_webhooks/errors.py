"""Exceptions raised by the Carerix webhooks client and CLI."""

from typing import Optional


class CarerixError(Exception):
    """Base class for all errors reported by the CLI."""

    pass


class ConfigurationError(CarerixError):
    """Raised when a required setting is missing or the env file is unreadable."""

    pass


class AuthError(CarerixError):
    """Raised when the OAuth token exchange fails."""

    pass


class RequestError(CarerixError):
    """Raised when a webhooks API request fails."""

    def __init__(self, message: str, operation: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


class ValidationError(CarerixError):
    """Raised when command-line input is malformed."""

    pass
