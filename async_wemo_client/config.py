# -*- coding: utf-8 -*-
"""Configuration for async_wemo_client."""

import logging
from typing import Any, Mapping, NamedTuple, Optional

import voluptuous as vol

from async_wemo_client.const import (
    BASIC_EVENT_CONTROL_PATH,
    BASIC_EVENT_SERVICE_TYPE,
    BELKIN_VENDOR_MARKER,
    DATAGRAM_SIZE,
    DESCRIPTION_SUFFIX,
    DISCOVERY_TIMEOUT,
    HTTP_TIMEOUT,
    NS,
    SSDP_MX,
    SSDP_SOURCE,
    SSDP_ST_ALL,
    SSDP_TARGET,
    AddressTupleType,
)
from async_wemo_client.exceptions import WemoConfigError

_LOGGER = logging.getLogger(__name__)


class WemoConfig(NamedTuple):
    """Settings shared by the discovery and control components."""

    ssdp_target: AddressTupleType = SSDP_TARGET
    ssdp_source: AddressTupleType = SSDP_SOURCE
    ssdp_mx: int = SSDP_MX
    search_target: str = SSDP_ST_ALL
    datagram_size: int = DATAGRAM_SIZE
    vendor_marker: str = BELKIN_VENDOR_MARKER
    description_suffix: str = DESCRIPTION_SUFFIX
    control_path: str = BASIC_EVENT_CONTROL_PATH
    service_type: str = BASIC_EVENT_SERVICE_TYPE
    soap_envelope_ns: str = NS["soap_envelope"]
    soap_encoding_ns: str = NS["soap_encoding"]
    http_timeout: float = HTTP_TIMEOUT
    discovery_timeout: Optional[float] = DISCOVERY_TIMEOUT


DEFAULT_CONFIG = WemoConfig()


def _address_tuple(value: Any) -> AddressTupleType:
    """Coerce a (host, port) pair or a 'host:port' string."""
    if isinstance(value, str):
        host, _, port = value.rpartition(":")
        if not host:
            raise vol.Invalid(f"Expected host:port, got: {value}")
        value = (host, port)

    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise vol.Invalid(f"Expected (host, port), got: {value}")

    host, port = value
    try:
        port = int(port)
    except (TypeError, ValueError) as err:
        raise vol.Invalid(f"Invalid port: {port}") from err
    if not 0 <= port <= 65535:
        raise vol.Invalid(f"Port out of range: {port}")
    return str(host), port


_POSITIVE_NUMBER = vol.All(vol.Coerce(float), vol.Range(min=0, min_included=False))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional("ssdp_target"): _address_tuple,
        vol.Optional("ssdp_source"): _address_tuple,
        vol.Optional("ssdp_mx"): vol.All(vol.Coerce(int), vol.Range(min=1, max=5)),
        vol.Optional("search_target"): vol.All(str, vol.Length(min=1)),
        vol.Optional("datagram_size"): vol.All(
            vol.Coerce(int), vol.Range(min=512, max=65535)
        ),
        vol.Optional("vendor_marker"): vol.All(str, vol.Length(min=1)),
        vol.Optional("description_suffix"): str,
        vol.Optional("control_path"): vol.All(str, vol.Match(r"^/")),
        vol.Optional("service_type"): vol.All(str, vol.Match(r"^urn:")),
        vol.Optional("soap_envelope_ns"): vol.Url(),
        vol.Optional("soap_encoding_ns"): vol.Url(),
        vol.Optional("http_timeout"): _POSITIVE_NUMBER,
        vol.Optional("discovery_timeout"): vol.Any(None, _POSITIVE_NUMBER),
    }
)


def load_config(
    data: Optional[Mapping[str, Any]] = None, base: WemoConfig = DEFAULT_CONFIG
) -> WemoConfig:
    """Validate data and merge it over base."""
    try:
        validated = CONFIG_SCHEMA(dict(data or {}))
    except vol.Invalid as err:
        raise WemoConfigError(f"Invalid configuration: {err}") from err

    config = base._replace(**validated)
    _LOGGER.debug("Using config: %s", config)
    return config
