"""Exception types shared by the relay and the composer."""

from typing import Optional


class RelayError(Exception):
    """Base class for failures while relaying a generation request."""


class ValidationError(RelayError):
    """A required request field is missing or empty."""

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)
        self.message = message


class UpstreamError(RelayError):
    """The generation provider failed or returned no usable text."""

    def __init__(self, details: str, cause: Optional[BaseException] = None):
        super().__init__(details)
        self.details = details
        self.cause = cause


class ConfigurationError(RuntimeError):
    """The selected provider cannot be built from the current settings."""


class ComposerValidationError(ValueError):
    """Form input is incomplete; the request is never sent."""


class ComposerRequestError(RuntimeError):
    """The backend could not be reached or answered with an error."""
