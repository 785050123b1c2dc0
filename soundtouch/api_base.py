"""SoundTouch HTTP API core client.

Transport only: builds the base URL, performs GET/POST round trips against the
speaker's embedded web server and maps every transport failure onto the
exception taxonomy in :mod:`.exceptions`.  The high-level commands live in the
``api_*`` mixins that :class:`.api.SoundTouchClient` composes on top of this
class.
"""

from __future__ import annotations

import asyncio
import ipaddress
import logging
from typing import Any, TypeVar

import aiohttp
import async_timeout
from aiohttp import ClientSession
from pydantic import BaseModel, ValidationError

from .const import CONTENT_TYPE_XML, DEFAULT_PORT, DEFAULT_TIMEOUT
from .exceptions import (
    SoundTouchApiError,
    SoundTouchConnectionError,
    SoundTouchError,
    SoundTouchInvalidDataError,
    SoundTouchRequestError,
    SoundTouchTimeoutError,
    SoundTouchValidationError,
)
from .xml_codec import decode_response, parse_error_body

_LOGGER = logging.getLogger(__name__)

HEADERS: dict[str, str] = {"Content-Type": CONTENT_TYPE_XML}

_ModelT = TypeVar("_ModelT", bound=BaseModel)

__all__ = [
    "SoundTouchClient",
    "SoundTouchError",
    "SoundTouchRequestError",
    "SoundTouchConnectionError",
    "SoundTouchTimeoutError",
    "SoundTouchApiError",
    "SoundTouchInvalidDataError",
    "SoundTouchValidationError",
]


def _split_host(host: str, port: int) -> tuple[str, int]:
    """Separate an optional ``:port`` suffix from *host*.

    Bare IPv6 literals are returned untouched; ``[v6]:port`` and
    ``name:port`` override *port*.
    """
    if host.startswith("[") and "]:" in host:
        bracket_end = host.find("]:")
        try:
            return host[1:bracket_end], int(host[bracket_end + 2 :])
        except ValueError:
            return host, port

    if ":" in host and not host.startswith("["):
        try:
            ipaddress.IPv6Address(host)
            return host, port
        except ipaddress.AddressValueError:
            pass
        host_part, port_part = host.rsplit(":", 1)
        try:
            return host_part, int(port_part)
        except ValueError:
            return host, port

    return host, port


def validate_range(name: str, value: Any, minimum: int, maximum: int) -> int:
    """Return *value* if it is an integer within ``[minimum, maximum]``.

    Raises:
        SoundTouchValidationError: wrong type or out of range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise SoundTouchValidationError(f"{name} must be an integer, got {value!r}")
    if not minimum <= value <= maximum:
        raise SoundTouchValidationError(f"{name} must be between {minimum} and {maximum}, got {value}")
    return value


class SoundTouchClient:
    """Minimal SoundTouch HTTP client – transport and error classification."""

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT,
        session: ClientSession | None = None,
    ) -> None:
        """Instantiate the client.

        Args:
            host: Speaker hostname or IP. A trailing ":<port>" is respected.
            port: HTTP port when *host* does not include one.
            timeout: Per-request timeout (seconds).
            session: Optional caller-owned *aiohttp* session. Without one,
                every request runs in its own short-lived session.
        """
        self._host, self._port = _split_host(host, port)
        self._timeout = float(timeout)
        self._session = session

        # IPv6 needs brackets inside URLs.
        host_url = f"[{self._host}]" if ":" in self._host and not self._host.startswith("[") else self._host
        self._base_url = f"http://{host_url}:{self._port}"

    # ------------------------------------------------------------------
    # Configuration (read-only) -----------------------------------------
    # ------------------------------------------------------------------

    @property
    def host(self) -> str:
        """Host address (IP or hostname)."""
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_url(self) -> str:
        """Absolute URL every endpoint path is appended to."""
        return self._base_url

    # ------------------------------------------------------------------
    # Low-level request helpers ----------------------------------------
    # ------------------------------------------------------------------

    async def _request(self, endpoint: str, method: str = "GET", data: str | None = None) -> str:
        """Perform one HTTP round trip and return the response body as text.

        Failure classification, in priority order:

        1. refused connection or unresolvable host -> :class:`SoundTouchConnectionError`
        2. timeout -> :class:`SoundTouchTimeoutError`
        3. error status with a structured error body -> :class:`SoundTouchApiError`
        4. any other transport failure -> :class:`SoundTouchConnectionError`

        Anything that is not a transport error propagates unchanged.
        """
        url = f"{self._base_url}{endpoint}"
        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["data"] = data.encode("utf-8")
            kwargs["headers"] = HEADERS

        _LOGGER.debug("%s %s", method, url)
        try:
            async with async_timeout.timeout(self._timeout):
                if self._session is not None:
                    return await self._send(self._session, method, url, **kwargs)
                async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout)) as session:
                    return await self._send(session, method, url, **kwargs)
        except aiohttp.ClientConnectorError as err:
            if isinstance(getattr(err, "os_error", None), TimeoutError):
                _LOGGER.debug("Connect to %s timed out: %s", url, err)
                raise SoundTouchTimeoutError(
                    f"Request to {self._base_url} timed out", endpoint=url, last_error=err
                ) from err
            _LOGGER.debug("Connection to %s failed: %s", url, err)
            raise SoundTouchConnectionError(
                f"Could not connect to speaker at {self._base_url}", endpoint=url, last_error=err
            ) from err
        except asyncio.TimeoutError as err:
            # also covers aiohttp.ServerTimeoutError
            _LOGGER.debug("Request to %s timed out after %.1fs", url, self._timeout)
            raise SoundTouchTimeoutError(
                f"Request to {self._base_url} timed out", endpoint=url, last_error=err
            ) from err
        except aiohttp.ClientError as err:
            _LOGGER.debug("Request to %s failed: %s", url, err)
            raise SoundTouchConnectionError(f"Request failed: {err}", endpoint=url, last_error=err) from err

    async def _send(self, session: ClientSession, method: str, url: str, **kwargs: Any) -> str:
        resp = await session.request(method, url, **kwargs)
        async with resp:
            try:
                text = await resp.text()
            except UnicodeDecodeError as err:
                _LOGGER.debug("Undecodable body from %s (HTTP %s): %s", url, resp.status, err)
                if resp.status >= 400:
                    raise aiohttp.ClientResponseError(
                        resp.request_info, resp.history, status=resp.status, message=resp.reason or ""
                    ) from err
                raise SoundTouchInvalidDataError(f"Response from {url} is not valid text: {err}") from err
            _LOGGER.debug("%s %s -> HTTP %s", method, url, resp.status)
            if resp.status >= 400:
                api_error = parse_error_body(text)
                if api_error is not None:
                    _LOGGER.debug(
                        "Speaker rejected %s: %s (code %s)", url, api_error.error_name, api_error.error_code
                    )
                    raise api_error
                raise aiohttp.ClientResponseError(
                    resp.request_info, resp.history, status=resp.status, message=resp.reason or ""
                )
            return text

    async def _get(self, endpoint: str) -> dict[str, Any]:
        """GET *endpoint* and return the decoded, normalised root element."""
        text = await self._request(endpoint)
        return decode_response(endpoint, text)

    async def _post(self, endpoint: str, body: str | None = None) -> None:
        """POST the XML fragment *body* to *endpoint*; the reply is discarded."""
        await self._request(endpoint, method="POST", data=body)

    async def _get_model(self, endpoint: str, model: type[_ModelT]) -> _ModelT:
        """GET *endpoint* and validate the payload into *model*.

        A payload the model rejects is a response contract violation and is
        reported as :class:`SoundTouchInvalidDataError`.
        """
        payload = await self._get(endpoint)
        try:
            return model.model_validate(payload)
        except ValidationError as err:
            raise SoundTouchInvalidDataError(f"Unexpected response from {endpoint}: {err}") from err
