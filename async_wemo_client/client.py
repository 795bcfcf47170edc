# -*- coding: utf-8 -*-
"""Wemo basic event (on/off) control module."""

import logging
from abc import ABC
from typing import Mapping, Optional, Tuple
from xml.etree import ElementTree as ET
from xml.sax.saxutils import escape

import defusedxml.ElementTree as DET
import voluptuous as vol

from async_wemo_client.config import DEFAULT_CONFIG, WemoConfig
from async_wemo_client.const import (
    ACTION_GET_BINARY_STATE,
    ACTION_SET_BINARY_STATE,
    BINARY_STATE,
    NS,
)
from async_wemo_client.exceptions import (
    WemoActionError,
    WemoContentError,
    WemoResponseError,
    WemoValueError,
    WemoXmlParseError,
)
from async_wemo_client.utils import split_lines

_LOGGER = logging.getLogger(__name__)

BINARY_STATE_FIELD = f"<{BINARY_STATE}>"


class WemoRequester(ABC):
    """
    Abstract base class used for performing async HTTP requests.

    Implement method async_http_request() in your concrete class.
    """

    # pylint: disable=too-few-public-methods

    async def async_http_request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> Tuple[int, Mapping[str, str], str]:
        """
        Do a HTTP request.

        :param method HTTP Method
        :param url URL to call
        :param headers Headers to send
        :param body Body to send

        :return status code, headers, body
        """
        raise NotImplementedError()


def create_soap_envelope(
    action: str,
    service_type: str,
    arguments: Optional[Mapping[str, str]] = None,
    envelope_ns: str = NS["soap_envelope"],
    encoding_ns: str = NS["soap_encoding"],
) -> str:
    """Create the SOAP 1.1 envelope to call action."""
    soap_args = "".join(
        f"<{name}>{escape(value)}</{name}> "
        for name, value in (arguments or {}).items()
    )
    return (
        f'<?xml version="1.0" encoding="utf-8" ?>'
        f'<s:Envelope xmlns:s="{envelope_ns}" s:encodingStyle="{encoding_ns}"> '
        f"<s:Body> "
        f'<u:{action} xmlns:u="{service_type}"> '
        f"{soap_args}"
        f"</u:{action}> "
        f"</s:Body> "
        f"</s:Envelope>"
    )


def create_soap_headers(service_type: str, action: str) -> Mapping[str, str]:
    """Create the HTTP headers to call action."""
    return {
        "Content-Type": 'text/xml; charset="utf-8"',
        "SOAPACTION": f'"{service_type}#{action}"',
    }


def parse_binary_state(response_body: str) -> bool:
    """
    Scan a GetBinaryState response for the state.

    Any line starting with `<BinaryState>` directly followed by `1` means on.
    No XML parsing is done, a missing tag means off.
    """
    state = False
    for line in split_lines(response_body):
        if line.startswith(BINARY_STATE_FIELD):
            if line[len(BINARY_STATE_FIELD) : len(BINARY_STATE_FIELD) + 1] == "1":
                state = True

    return state


def parse_binary_state_xml(response_body: str) -> bool:
    """Parse a GetBinaryState response as XML."""
    try:
        xml = DET.fromstring(response_body.strip(" \t\r\n\0"))
    except ET.ParseError as err:
        _LOGGER.debug("Unable to parse XML: %s\nXML:\n%s", err, response_body)
        raise WemoXmlParseError(err) from err

    value = xml.findtext(f".//{BINARY_STATE}")
    if value is None:
        value = xml.findtext(f".//{{*}}{BINARY_STATE}")
    if value is None:
        raise WemoContentError(f"No {BINARY_STATE} in response: {response_body}")

    # Insight switches report e.g. "8|1612345678|..." while on standby.
    return value.strip().startswith("1")


def _parse_fault(
    response_body: str,
    status_code: int,
    response_headers: Optional[Mapping] = None,
) -> None:
    """Parse SOAP fault and raise appropriate exception."""
    try:
        xml = DET.fromstring(response_body.strip(" \t\r\n\0"))
    except ET.ParseError:
        return

    fault = xml.find(".//soap_envelope:Body/soap_envelope:Fault", NS)
    if fault is None:
        return

    error_code_str = fault.findtext(".//control:errorCode", None, NS)
    error_code = int(error_code_str) if error_code_str else None
    error_desc = fault.findtext(".//control:errorDescription", None, NS)
    raise WemoActionError(
        status=status_code,
        error_code=error_code,
        error_desc=error_desc,
        headers=response_headers,
    )


class WemoBasicEventService:
    """Basic event service of a Wemo device, holding the on/off state."""

    def __init__(
        self,
        requester: WemoRequester,
        base_url: str,
        config: WemoConfig = DEFAULT_CONFIG,
        strict: bool = False,
    ) -> None:
        """Initialize."""
        try:
            vol.Url()(base_url)
        except vol.Invalid as err:
            raise WemoValueError("base_url", base_url) from err

        self.requester = requester
        self.base_url = base_url
        self.config = config
        self.strict = strict

    @property
    def control_url(self) -> str:
        """Get the control URL of the service."""
        return self.base_url + self.config.control_path

    @property
    def service_type(self) -> str:
        """Get the service type."""
        return self.config.service_type

    async def async_send_soap_action(
        self, action: str, arguments: Optional[Mapping[str, str]] = None
    ) -> str:
        """Call action and return the raw response body."""
        headers = create_soap_headers(self.service_type, action)
        body = create_soap_envelope(
            action,
            self.service_type,
            arguments,
            envelope_ns=self.config.soap_envelope_ns,
            encoding_ns=self.config.soap_encoding_ns,
        )

        _LOGGER.debug(
            "Calling %s at %s, arguments: %s", action, self.control_url, arguments
        )
        (
            status_code,
            response_headers,
            response_body,
        ) = await self.requester.async_http_request(
            "POST", self.control_url, headers, body
        )

        if status_code != 200:
            _parse_fault(response_body, status_code, response_headers)

            # Couldn't parse body for fault details, raise generic response error
            raise WemoResponseError(
                status=status_code,
                headers=response_headers,
                message=f"Error calling {action}, status: {status_code}, "
                f"body: {response_body}",
            )

        return response_body

    async def async_get_binary_state(self) -> bool:
        """Get the on/off state."""
        response_body = await self.async_send_soap_action(ACTION_GET_BINARY_STATE)
        if self.strict:
            return parse_binary_state_xml(response_body)
        return parse_binary_state(response_body)

    async def async_set_binary_state(self, state: bool) -> str:
        """
        Set the on/off state.

        The response is returned as is. Query the state again to know
        if the device actually switched.
        """
        return await self.async_send_soap_action(
            ACTION_SET_BINARY_STATE, {BINARY_STATE: "1" if state else "0"}
        )

    async def async_toggle(self) -> bool:
        """Switch to the opposite state and return the state read back."""
        current_state = await self.async_get_binary_state()
        await self.async_set_binary_state(not current_state)
        return await self.async_get_binary_state()

    def __str__(self) -> str:
        """To string."""
        return f"<WemoBasicEventService({self.control_url})>"
