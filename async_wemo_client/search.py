# -*- coding: utf-8 -*-
"""async_wemo_client.search module."""

import asyncio
import logging
from asyncio import DatagramTransport
from asyncio.events import AbstractEventLoop
from types import TracebackType
from typing import Any, Callable, Optional, Type, cast

import async_timeout

from async_wemo_client.config import DEFAULT_CONFIG, WemoConfig
from async_wemo_client.const import NO_LOCATION, AddressTupleType
from async_wemo_client.exceptions import (
    WemoBindError,
    WemoDiscoveryTimeoutError,
    WemoNoLocationError,
)
from async_wemo_client.ssdp import (
    SsdpProtocol,
    build_wemo_search_packet,
    decode_ssdp_packet,
    find_location,
    get_ssdp_socket,
    is_wemo_response,
    strip_description_suffix,
)
from async_wemo_client.utils import CaseInsensitiveDict, format_numbered_lines

_LOGGER = logging.getLogger(__name__)

ResponseCallback = Callable[[str, CaseInsensitiveDict, AddressTupleType, bool], Any]


def print_response(
    message: str, headers: CaseInsensitiveDict, addr: AddressTupleType, matched: bool
) -> None:
    """Dump a discovery response to the console."""
    if not matched:
        server = headers.get("SERVER", "unknown")
        print(f"[ --- Ignoring response from {addr}, server: {server} --- ]")
        return

    print(f"[ --- Got response from {addr} --- ]")
    print(f"      Location: {find_location(message)}\n\n")
    print("      PAYLOAD\n")
    print(format_numbered_lines(message))
    print("\n\n")


class WemoSearchListener:
    """
    SSDP search (response) listener for a single Wemo device.

    The first response from a Belkin device carrying a setup document
    resolves the listener; everything else is ignored.
    """

    # pylint: disable=too-many-instance-attributes

    def __init__(
        self,
        config: WemoConfig = DEFAULT_CONFIG,
        strict: bool = True,
        on_response: Optional[ResponseCallback] = None,
        loop: Optional[AbstractEventLoop] = None,
    ) -> None:
        """Init the search listener class."""
        self.config = config
        self.strict = strict
        self.on_response = on_response
        self.loop = loop
        self.source: Optional[AddressTupleType] = None
        self._transport: Optional[DatagramTransport] = None
        self._result: Optional["asyncio.Future[str]"] = None

    @property
    def target(self) -> AddressTupleType:
        """Get target."""
        return self.config.ssdp_target

    def async_search(self, override_target: Optional[AddressTupleType] = None) -> None:
        """
        Send the M-SEARCH packet.

        :param override_target Destination instead of the configured target
        """
        assert self._transport is not None, "Call async_start() first"
        packet = build_wemo_search_packet(self.config)

        protocol = cast(SsdpProtocol, self._transport.get_protocol())
        protocol.send_ssdp_packet(packet, override_target or self.target)

    def _on_data(self, data: bytes, addr: AddressTupleType) -> None:
        """Handle data."""
        data = data[: self.config.datagram_size]
        message = data.decode(errors="replace")
        _, headers = decode_ssdp_packet(data)
        matched = is_wemo_response(message, self.config)
        if self.on_response:
            self.on_response(message, headers, addr, matched)

        if not matched:
            _LOGGER.debug("Ignoring response from %s", addr)
            return

        if self._result is None or self._result.done():
            _LOGGER.debug("Device already found, ignoring response from %s", addr)
            return

        _LOGGER.debug(
            "Received response from Belkin device, USN: %s, server: %s",
            headers.get("USN", "<no USN>"),
            headers.get("SERVER", ""),
        )

        location = find_location(message)
        if location == NO_LOCATION and self.strict:
            self._result.set_exception(WemoNoLocationError(message))
            return

        base_url = strip_description_suffix(location, self.config.description_suffix)
        _LOGGER.debug("Found Belkin device at %s, from: %s", base_url, addr)
        self._result.set_result(base_url)

    def _on_connect(self, transport: DatagramTransport) -> None:
        _LOGGER.debug("On connect, transport: %s", transport)
        self._transport = transport

    async def async_start(self) -> None:
        """Start the listener."""
        _LOGGER.debug("Start listening for search responses")
        loop = self.loop or asyncio.get_running_loop()

        sock, self.source, _target = get_ssdp_socket(
            self.config.ssdp_source, self.target
        )
        _LOGGER.debug("Bound to address: %s", self.source)

        self._result = loop.create_future()
        try:
            await loop.create_datagram_endpoint(
                lambda: SsdpProtocol(on_connect=self._on_connect, on_data=self._on_data),
                sock=sock,
            )
        except OSError as err:
            _LOGGER.error("Error listening on %s: %s", self.source, err)
            sock.close()
            raise WemoBindError(err.errno, err.strerror) from err

    async def async_wait(self, timeout: Optional[float] = None) -> str:
        """
        Wait for the first Belkin device to respond.

        :param timeout Seconds to wait, None to wait forever

        :return base URL of the device
        """
        assert self._result is not None, "Call async_start() first"
        try:
            async with async_timeout.timeout(timeout):
                return await self._result
        except asyncio.TimeoutError as err:
            raise WemoDiscoveryTimeoutError(
                f"No Belkin device responded within {timeout} seconds"
            ) from err

    def async_stop(self) -> None:
        """Stop the listener."""
        if self._transport:
            self._transport.close()
            self._transport = None

    async def __aenter__(self) -> "WemoSearchListener":
        """Start listening."""
        await self.async_start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        """Stop listening."""
        self.async_stop()


async def async_discover(
    config: WemoConfig = DEFAULT_CONFIG,
    verbose: bool = False,
    strict: bool = True,
    on_response: Optional[ResponseCallback] = None,
    loop: Optional[AbstractEventLoop] = None,
) -> str:
    """
    Discover a Wemo device via SSDP and return its base URL.

    With strict disabled, a matching response without a LOCATION header
    yields NO_LOCATION instead of raising WemoNoLocationError.
    """
    # pylint: disable=too-many-arguments
    if on_response is None and verbose:
        on_response = print_response

    async with WemoSearchListener(
        config, strict=strict, on_response=on_response, loop=loop
    ) as listener:
        listener.async_search()
        return await listener.async_wait(config.discovery_timeout)
