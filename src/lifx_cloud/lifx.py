"""Asynchronous Python client for the LIFX cloud API."""

from __future__ import annotations

import asyncio
import logging
import os
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

import aiohttp
import orjson
from yarl import URL

from .__version__ import __version__
from .builders import Scenes, Selected, SetStates, ValidateColor
from .const import API_BASE_URL
from .exceptions import (
    LIFXApiError,
    LIFXAuthenticationError,
    LIFXBadRequestError,
    LIFXConfigurationError,
    LIFXConnectionError,
    LIFXConnectionTimeoutError,
    LIFXForbiddenError,
    LIFXNotFoundError,
    LIFXRateLimitError,
    LIFXServerError,
)
from .selector import parse_selector
from .utils import parse_rate_limit_reset

if TYPE_CHECKING:
    from collections.abc import Mapping

    from multidict import CIMultiDictProxy

    from .color import Color
    from .const import NamedColor
    from .selector import AnySelector

_LOGGER = logging.getLogger(__name__)

TOKEN_ENVIRONMENT_VARIABLE = "LIFX_TOKEN"

_STATUS_ERRORS: dict[int, type[LIFXApiError]] = {
    400: LIFXBadRequestError,
    401: LIFXAuthenticationError,
    403: LIFXForbiddenError,
    404: LIFXNotFoundError,
    422: LIFXBadRequestError,
}


@dataclass
class LIFX:
    """Main class for handling connections with the LIFX cloud API.

    A single instance is meant to be created and shared; all requests
    built from it use the same HTTP session (and with that, connection
    pool). Requests themselves are independent of each other.

    Example:
    -------
        async with LIFX("token") as lifx:
            await lifx.select(Selector.all()).set_state().power(True).send()

    """

    token: str
    request_timeout: float = 8.0
    session: aiohttp.client.ClientSession | None = None
    base_url: str = API_BASE_URL
    user_agent: str | None = None

    _close_session: bool = False

    def __post_init__(self) -> None:
        """Validate the configuration of the client.

        Raises
        ------
            LIFXConfigurationError: The access token is malformed.

        """
        if not isinstance(self.token, str) or not self.token:
            msg = "An access token is required to use the LIFX API"
            raise LIFXConfigurationError(msg)

        if not self.token.isprintable() or any(char.isspace() for char in self.token):
            msg = "The access token contains whitespace or unprintable characters"
            raise LIFXConfigurationError(msg)

        if self.request_timeout <= 0:
            msg = f"Request timeout must be positive, got {self.request_timeout}"
            raise LIFXConfigurationError(msg)

        if self.user_agent is None:
            self.user_agent = f"PythonLIFXCloud/{__version__}"

    def __repr__(self) -> str:
        """Return a representation of the client, without the token."""
        return f"LIFX(base_url={self.base_url!r}, request_timeout={self.request_timeout})"

    @classmethod
    def from_env(cls, **kwargs: Any) -> Self:
        """Create a client using the token from the `LIFX_TOKEN` variable.

        Args:
        ----
            kwargs: Other settings for the client, e.g. `request_timeout`.

        Returns:
        -------
            The LIFX client.

        Raises:
        ------
            LIFXConfigurationError: The environment variable is not set.

        """
        if not (token := os.environ.get(TOKEN_ENVIRONMENT_VARIABLE)):
            msg = f"The {TOKEN_ENVIRONMENT_VARIABLE} environment variable is not set"
            raise LIFXConfigurationError(msg)
        return cls(token, **kwargs)

    async def request(
        self,
        uri: str = "",
        method: str = "GET",
        data: dict[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """Handle a request to the LIFX API.

        A generic method for sending/handling HTTP requests done against
        the LIFX cloud API. Nothing is retried here; see the `retries`
        option on the request builders.

        Args:
        ----
            uri: Request URI, relative to the API base, e.g. `/lights/all`.
                Path segments must already be percent-encoded.
            method: HTTP method to use for the request. E.g., "GET" or "PUT".
            data: Dictionary of data to send as JSON body.
            params: Query string parameters.

        Returns:
        -------
            A Python object (JSON decoded) with the response from the API,
            or the response text if the API did not return JSON.

        Raises:
        ------
            LIFXConnectionError: An error occurred while communicating with
                the LIFX API.
            LIFXConnectionTimeoutError: A timeout occurred while communicating
                with the LIFX API.
            LIFXApiError: The LIFX API responded with an error.

        """
        base = URL(self.base_url)
        url = base.with_path(f"{base.raw_path.rstrip('/')}{uri}", encoded=True)
        if params:
            url = url.with_query(params)

        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.token}",
            "User-Agent": self.user_agent or "",
        }

        if self.session is None:
            self.session = aiohttp.ClientSession()
            self._close_session = True

        _LOGGER.debug("Sending %s request to %s with body %s", method, url, data)

        try:
            async with asyncio.timeout(self.request_timeout):
                response = await self.session.request(
                    method,
                    url,
                    json=data,
                    headers=headers,
                )

            content_type = response.headers.get("Content-Type", "")
            if response.status // 100 in [4, 5]:
                contents = await response.read()
                response.close()

                if "application/json" in content_type:
                    detail = orjson.loads(contents)
                else:
                    detail = {"message": contents.decode("utf8")}
                raise self._api_error(response.status, detail, response.headers)

            response_data = await response.text()
            if "application/json" in content_type:
                response_data = orjson.loads(response_data)

        except asyncio.TimeoutError as exception:
            msg = f"Timeout occurred while connecting to the LIFX API at {url.host}"
            raise LIFXConnectionTimeoutError(msg) from exception
        except (aiohttp.ClientError, socket.gaierror) as exception:
            msg = f"Error occurred while communicating with the LIFX API at {url.host}"
            raise LIFXConnectionError(msg) from exception

        _LOGGER.debug("Received response %s from %s", response.status, url)
        return response_data

    @staticmethod
    def _api_error(
        status: int,
        detail: Any,
        headers: CIMultiDictProxy[str],
    ) -> LIFXApiError:
        """Return the exception matching an error response of the API."""
        if not isinstance(detail, dict):
            detail = {"message": detail}

        if status == 429:  # noqa: PLR2004
            return LIFXRateLimitError(
                status,
                detail,
                reset=parse_rate_limit_reset(headers.get("X-RateLimit-Reset")),
            )
        if status // 100 == 5:  # noqa: PLR2004
            return LIFXServerError(status, detail)
        return _STATUS_ERRORS.get(status, LIFXApiError)(status, detail)

    def select(self, selector: AnySelector | str) -> Selected:
        """Specify the lights to act upon.

        Args:
        ----
            selector: The selector, or its string form (e.g. `group:Kitchen`).

        Returns:
        -------
            A scope to build requests for the selected lights.

        """
        if isinstance(selector, str):
            selector = parse_selector(selector)
        return Selected(self, selector)

    def set_states(self) -> SetStates:
        """Create a request to set different states on different lights."""
        return SetStates(self)

    def scenes(self) -> Scenes:
        """Entry point for working with scenes."""
        return Scenes(self)

    def validate(self, color: Color | NamedColor | str) -> ValidateColor:
        """Create a request letting the API validate the given color."""
        return ValidateColor(self, color)

    async def close(self) -> None:
        """Close open client session."""
        if self.session and self._close_session:
            await self.session.close()

    async def __aenter__(self) -> Self:
        """Async enter.

        Returns
        -------
            The LIFX object.

        """
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        """Async exit.

        Args:
        ----
            _exc_info: Exec type.

        """
        await self.close()
