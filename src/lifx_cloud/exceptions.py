"""Exceptions for LIFX."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import Results


class LIFXError(Exception):
    """Generic LIFX exception."""


class LIFXConfigurationError(LIFXError):
    """LIFX client or request is configured incorrectly."""


class LIFXInvalidParameterError(LIFXConfigurationError):
    """A request parameter is out of range or malformed."""


class LIFXRequestConsumedError(LIFXError):
    """A request builder was used again after it has been sent."""


class LIFXConnectionError(LIFXError):
    """LIFX connection exception."""


class LIFXConnectionTimeoutError(LIFXConnectionError):
    """LIFX connection Timeout exception."""


class LIFXApiError(LIFXError):
    """The LIFX API answered with an error."""

    def __init__(self, status: int, detail: dict[str, Any]) -> None:
        """Initialize the error with the HTTP status and the API response."""
        super().__init__(status, detail)
        self.status = status
        self.detail = detail


class LIFXResponseError(LIFXError):
    """The LIFX API answered with a response that could not be decoded."""


class LIFXBadRequestError(LIFXApiError):
    """The request was malformed (HTTP 400 or 422)."""


class LIFXAuthenticationError(LIFXApiError):
    """The access token was rejected (HTTP 401)."""


class LIFXForbiddenError(LIFXApiError):
    """The token lacks the required OAuth scope (HTTP 403)."""


class LIFXNotFoundError(LIFXApiError):
    """The selector or scene did not match anything (HTTP 404)."""


class LIFXRateLimitError(LIFXApiError):
    """The API is enforcing its rate limit (HTTP 429)."""

    def __init__(
        self,
        status: int,
        detail: dict[str, Any],
        reset: datetime | None = None,
    ) -> None:
        """Initialize the error, with the moment the limit is lifted."""
        super().__init__(status, detail)
        self.reset = reset


class LIFXServerError(LIFXApiError):
    """The LIFX API failed to handle a valid request (HTTP 5xx)."""


class LIFXPartialFailureError(LIFXApiError):
    """One or more selected lights did not acknowledge the request."""

    def __init__(self, status: int, detail: dict[str, Any], results: Results) -> None:
        """Initialize the error with the per-light results."""
        super().__init__(status, detail)
        self.results = results
