# -*- coding: utf-8 -*-
"""Exceptions raised by async_wemo_client."""

import asyncio
from typing import Any, Optional
from xml.etree import ElementTree as ET

import aiohttp

# pylint: disable=too-many-ancestors


class WemoError(Exception):
    """WemoError."""


class WemoConfigError(WemoError):
    """Invalid configuration."""


class WemoContentError(WemoError):
    """Content of a Wemo response is invalid."""


class WemoNoLocationError(WemoContentError):
    """Discovery response from a Wemo device without a LOCATION header."""

    def __init__(self, message: str) -> None:
        """Initialize."""
        super().__init__("No LOCATION header in discovery response")
        self.response = message


class WemoXmlParseError(WemoContentError, ET.ParseError):
    """Wemo response is not valid XML."""

    def __init__(self, orig_err: ET.ParseError) -> None:
        """Initialize from original ParseError, to match it."""
        super().__init__(str(orig_err))
        self.code = orig_err.code
        self.position = orig_err.position


class WemoValueError(WemoContentError):
    """Invalid value error."""

    def __init__(self, name: str, value: Any) -> None:
        """Initialize."""
        super().__init__(f"Invalid value for {name}: '{value}'")
        self.name = name
        self.value = value


class WemoDiscoveryError(WemoError):
    """Error while discovering a Wemo device."""


class WemoDiscoveryTimeoutError(WemoDiscoveryError, asyncio.TimeoutError):
    """No Wemo device answered before the deadline."""


class WemoBindError(WemoDiscoveryError, OSError):
    """Unable to create or bind the discovery socket."""

    def __init__(self, errno: Optional[int], strerror: Optional[str]) -> None:
        """Initialize simplified version of OSError."""
        super().__init__(errno, strerror)
        self.errno = errno
        self.strerror = strerror


class WemoCommunicationError(WemoError, aiohttp.ClientError):
    """Error occurred while communicating with the Wemo device."""


class WemoResponseError(WemoCommunicationError):
    """HTTP error code returned by the Wemo device."""

    def __init__(
        self,
        status: int,
        headers: Optional[aiohttp.typedefs.LooseHeaders] = None,
        message: str = "",
    ) -> None:
        """Initialize."""
        super().__init__(message or f"Did not receive HTTP 200 but {status}")
        self.status = status
        self.headers = headers


class WemoActionError(WemoResponseError):
    """SOAP fault returned for a Wemo action."""

    def __init__(
        self,
        status: int,
        error_code: Optional[int] = None,
        error_desc: Optional[str] = None,
        headers: Optional[aiohttp.typedefs.LooseHeaders] = None,
    ) -> None:
        """Initialize."""
        super().__init__(
            status,
            headers,
            f"Action failed, status: {status}, error: {error_code} ({error_desc})",
        )
        self.error_code = error_code
        self.error_desc = error_desc


class WemoClientResponseError(aiohttp.ClientResponseError, WemoResponseError):
    """HTTP response error with more details from aiohttp."""


class WemoConnectionError(WemoCommunicationError, aiohttp.ClientConnectionError):
    """Error in the underlying connection to the Wemo device.

    This could indicate that the device is offline.
    """


class WemoConnectionTimeoutError(
    WemoConnectionError, aiohttp.ServerTimeoutError, asyncio.TimeoutError
):
    """Timeout while communicating with the device."""
