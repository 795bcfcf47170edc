# -*- coding: utf-8 -*-
"""aiohttp requester module."""

import asyncio
import logging
from typing import Mapping, Optional, Tuple

import aiohttp
import async_timeout

from async_wemo_client.client import WemoRequester
from async_wemo_client.exceptions import (
    WemoClientResponseError,
    WemoCommunicationError,
    WemoConnectionError,
    WemoConnectionTimeoutError,
)

_LOGGER = logging.getLogger(__name__)
_LOGGER_TRAFFIC_SOAP = logging.getLogger("async_wemo_client.traffic.soap")


def _log_request(
    method: str, url: str, headers: Mapping[str, str], body: Optional[str]
) -> None:
    _LOGGER_TRAFFIC_SOAP.debug(
        "Sending request:\n%s %s\n%s\n%s\n",
        method,
        url,
        "\n".join([key + ": " + value for key, value in headers.items()]),
        body or "",
    )


def _log_response(status: int, headers: Mapping, body: bytes) -> None:
    _LOGGER_TRAFFIC_SOAP.debug(
        "Got response:\n%s\n%s\n\n%s",
        status,
        "\n".join([key + ": " + value for key, value in headers.items()]),
        body,
    )


async def _async_do_request(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Optional[str],
) -> Tuple[int, Mapping[str, str], str]:
    """Do the request and read the complete response body."""
    # pylint: disable=too-many-arguments
    async with session.request(method, url, headers=headers, data=body) as response:
        status = response.status
        resp_headers: Mapping = response.headers or {}
        resp_body = await response.read()
        _log_response(status, resp_headers, resp_body)

        resp_body_text = await response.text()

    return status, resp_headers, resp_body_text


class AiohttpRequester(WemoRequester):
    """Standard AiohttpRequester, a new session per request."""

    # pylint: disable=too-few-public-methods

    def __init__(
        self, timeout: float = 5, http_headers: Optional[Mapping[str, str]] = None
    ) -> None:
        """Initialize."""
        self._timeout = timeout
        self._http_headers = http_headers or {}

    async def async_http_request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> Tuple[int, Mapping[str, str], str]:
        """Do a HTTP request."""
        req_headers = {**self._http_headers, **(headers or {})}
        _log_request(method, url, req_headers, body)

        try:
            async with async_timeout.timeout(self._timeout):
                async with aiohttp.ClientSession() as session:
                    return await _async_do_request(
                        session, method, url, req_headers, body
                    )
        except asyncio.TimeoutError as err:
            raise WemoConnectionTimeoutError(str(err)) from err
        except aiohttp.ClientConnectionError as err:
            raise WemoConnectionError(str(err)) from err
        except aiohttp.ClientResponseError as err:
            raise WemoClientResponseError(
                request_info=err.request_info,
                history=err.history,
                status=err.status,
                message=err.message,
                headers=err.headers,
            ) from err
        except aiohttp.ClientError as err:
            raise WemoCommunicationError(str(err)) from err
        except UnicodeDecodeError as err:
            raise WemoCommunicationError(str(err)) from err


class AiohttpSessionRequester(WemoRequester):
    """
    Standard AiohttpSessionRequester.

    With pluggable session, owned by the caller.
    """

    # pylint: disable=too-few-public-methods

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout: float = 5,
        http_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Initialize."""
        self._session = session
        self._timeout = timeout
        self._http_headers = http_headers or {}

    async def async_http_request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> Tuple[int, Mapping[str, str], str]:
        """Do a HTTP request."""
        req_headers = {**self._http_headers, **(headers or {})}
        _log_request(method, url, req_headers, body)

        try:
            async with async_timeout.timeout(self._timeout):
                return await _async_do_request(
                    self._session, method, url, req_headers, body
                )
        except asyncio.TimeoutError as err:
            raise WemoConnectionTimeoutError(str(err)) from err
        except aiohttp.ClientConnectionError as err:
            raise WemoConnectionError(str(err)) from err
        except aiohttp.ClientResponseError as err:
            raise WemoClientResponseError(
                request_info=err.request_info,
                history=err.history,
                status=err.status,
                message=err.message,
                headers=err.headers,
            ) from err
        except aiohttp.ClientError as err:
            raise WemoCommunicationError(str(err)) from err
        except UnicodeDecodeError as err:
            raise WemoCommunicationError(str(err)) from err
