"""Error taxonomy for the prompt pipeline.

Every error carries the HTTP status the API answers with and the message that is
safe to show the client. Internal detail goes to the log, never the response.
"""

from typing import Optional

GENERIC_ERROR_MESSAGE = "An error occurred processing your request"
UPSTREAM_ERROR_MESSAGE = "AI service temporarily unavailable"


class PortfolioAIError(Exception):
    """Base class for request-level failures."""

    status_code: int = 500
    default_public_message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str, public_message: Optional[str] = None):
        super().__init__(message)
        self.public_message = public_message or self.default_public_message


class InputValidationError(PortfolioAIError):
    """Client sent a malformed or out-of-bounds payload. Message is shown verbatim."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, public_message=message)


class ConfigurationError(PortfolioAIError):
    """A required credential or endpoint is missing."""


class DataStoreError(PortfolioAIError):
    """A candidate data read failed at the transport level."""


class UpstreamServiceError(PortfolioAIError):
    """The completion API returned a non-success response."""

    default_public_message = UPSTREAM_ERROR_MESSAGE


class ResponseParseError(PortfolioAIError):
    """The model reply did not contain a usable fit verdict."""
