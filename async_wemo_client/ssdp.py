# -*- coding: utf-8 -*-
"""async_wemo_client.ssdp module."""

import logging
import socket
from asyncio import BaseTransport, DatagramProtocol, DatagramTransport
from ipaddress import ip_address
from typing import Callable, Mapping, Optional, Tuple, cast

from async_wemo_client.config import DEFAULT_CONFIG, WemoConfig
from async_wemo_client.const import (
    NO_LOCATION,
    SETUP_XML,
    SSDP_DISCOVER,
    SSDP_TARGET,
    AddressTupleType,
)
from async_wemo_client.exceptions import WemoBindError
from async_wemo_client.utils import CaseInsensitiveDict, split_lines, strip_suffix

LOCATION_FIELD = "LOCATION: "

_LOGGER = logging.getLogger(__name__)
_LOGGER_TRAFFIC_SSDP = logging.getLogger("async_wemo_client.traffic.ssdp")


def get_host_port_string(addr: AddressTupleType) -> str:
    """Return a host port pair."""
    return f"{addr[0]}:{addr[1]}"


def build_ssdp_packet(status_line: str, headers: Mapping[str, str]) -> bytes:
    """Construct a SSDP packet."""
    headers_str = "".join(f"{key}: {value}\r\n" for key, value in headers.items())
    return f"{status_line}\r\n{headers_str}\r\n".encode()


def build_ssdp_search_packet(
    ssdp_target: AddressTupleType, ssdp_mx: int, search_target: str
) -> bytes:
    """Construct a SSDP M-SEARCH packet."""
    request_line = "M-SEARCH * HTTP/1.1"
    headers = {
        "HOST": get_host_port_string(ssdp_target),
        "MAN": SSDP_DISCOVER,
        "MX": f"{ssdp_mx}",
        "ST": search_target,
    }
    return build_ssdp_packet(request_line, headers)


def build_wemo_search_packet(config: WemoConfig = DEFAULT_CONFIG) -> bytes:
    """
    Construct the M-SEARCH packet for a Wemo search.

    HOST is always the standard multicast address, whatever the destination;
    devices may ignore the request otherwise.
    """
    return build_ssdp_search_packet(SSDP_TARGET, config.ssdp_mx, config.search_target)


def find_location(message: str) -> str:
    """
    Find the value of the first LOCATION header in message.

    Only lines starting with exactly `LOCATION: ` qualify. Returns
    NO_LOCATION when no such line exists.
    """
    for line in split_lines(message):
        if line.startswith(LOCATION_FIELD):
            return line.split(LOCATION_FIELD)[1].strip()

    return NO_LOCATION


def strip_description_suffix(location: str, suffix: str = "/" + SETUP_XML) -> str:
    """Turn a description URL into the device base URL."""
    return strip_suffix(location, suffix)


def is_wemo_response(message: str, config: WemoConfig = DEFAULT_CONFIG) -> bool:
    """Test if message comes from a Belkin device with a setup document."""
    description_marker = config.description_suffix.lstrip("/") or SETUP_XML
    return config.vendor_marker in message and description_marker in message


def decode_ssdp_packet(data: bytes) -> Tuple[str, CaseInsensitiveDict]:
    """Decode a packet into its request/status line and headers."""
    lines = data.decode(errors="replace").replace("\r\n", "\n").split("\n")
    request_line = lines[0].strip()

    headers = CaseInsensitiveDict()
    for line in lines[1:]:
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if key and key not in headers:
            headers[key] = value.strip()

    return request_line, headers


class SsdpProtocol(DatagramProtocol):
    """SSDP Protocol."""

    def __init__(
        self,
        on_connect: Optional[Callable[[DatagramTransport], None]] = None,
        on_data: Optional[Callable[[bytes, AddressTupleType], None]] = None,
    ) -> None:
        """Initialize."""
        self.on_connect = on_connect
        self.on_data = on_data

        self.transport: Optional[DatagramTransport] = None

    def connection_made(self, transport: BaseTransport) -> None:
        """Handle connection made."""
        _LOGGER.debug(
            "Connection made, transport: %s, socket: %s",
            transport,
            transport.get_extra_info("socket"),
        )
        self.transport = cast(DatagramTransport, transport)

        if self.on_connect:
            self.on_connect(self.transport)

    def datagram_received(self, data: bytes, addr: AddressTupleType) -> None:
        """Handle a discovery-response."""
        _LOGGER_TRAFFIC_SSDP.debug("Received packet from %s: %s", addr, data)

        if self.on_data:
            self.on_data(data, addr)

    def error_received(self, exc: Exception) -> None:
        """Handle an error, keep listening."""
        sock: Optional[socket.socket] = (
            self.transport.get_extra_info("socket") if self.transport else None
        )
        _LOGGER.error(
            "Error reading from UDP: %s, transport: %s, socket: %s",
            exc,
            self.transport,
            sock,
        )

    def connection_lost(self, exc: Optional[Exception]) -> None:
        """Handle connection lost."""
        _LOGGER.debug("Lost connection, error: %s, transport: %s", exc, self.transport)

    def send_ssdp_packet(self, packet: bytes, target: AddressTupleType) -> None:
        """Send a SSDP packet."""
        assert self.transport
        _LOGGER.debug(
            "Sending SSDP packet, transport: %s, target: %s", self.transport, target
        )
        _LOGGER_TRAFFIC_SSDP.debug(
            "Sending SSDP packet, target: %s, data: %s", target, packet
        )
        self.transport.sendto(packet, target)


def get_ssdp_socket(
    source: AddressTupleType,
    target: AddressTupleType,
) -> Tuple[socket.socket, AddressTupleType, AddressTupleType]:
    """Create a socket to send the search from and receive responses on."""
    try:
        target_ip = ip_address(target[0])
        source_ip = ip_address(source[0])
    except ValueError as err:
        raise WemoBindError(None, str(err)) from err
    _LOGGER.debug("Creating socket, source: %s, target: %s", source, target)

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    except OSError as err:
        _LOGGER.error("Error creating UDP socket: %s", err)
        raise WemoBindError(err.errno, err.strerror) from err

    try:
        # set options
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

        # multicast
        if target_ip.is_multicast:
            sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_IF, source_ip.packed)
            sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, 2)

        sock.bind(source)
    except OSError as err:
        _LOGGER.error("Error binding UDP socket to %s: %s", source, err)
        sock.close()
        raise WemoBindError(err.errno, err.strerror) from err

    return sock, cast(AddressTupleType, sock.getsockname()), target
