# -*- coding: utf-8 -*-
"""Constants module."""

from typing import Tuple

AddressTupleType = Tuple[str, int]

SSDP_PORT = 1900
SSDP_IP_V4 = "239.255.255.250"
SSDP_TARGET = (SSDP_IP_V4, SSDP_PORT)
SSDP_SOURCE = ("0.0.0.0", 0)
SSDP_ST_ALL = "ssdp:all"
SSDP_MX = 5
SSDP_DISCOVER = '"ssdp:discover"'
DATAGRAM_SIZE = 4096

BELKIN_VENDOR_MARKER = "Belkin"
SETUP_XML = "setup.xml"
DESCRIPTION_SUFFIX = "/" + SETUP_XML
NO_LOCATION = "No location"

BASIC_EVENT_SERVICE_TYPE = "urn:Belkin:service:basicevent:1"
BASIC_EVENT_CONTROL_PATH = "/upnp/control/basicevent1"
ACTION_GET_BINARY_STATE = "GetBinaryState"
ACTION_SET_BINARY_STATE = "SetBinaryState"
BINARY_STATE = "BinaryState"

NS = {
    "soap_envelope": "http://schemas.xmlsoap.org/soap/envelope/",
    "soap_encoding": "http://schemas.xmlsoap.org/soap/encoding/",
    "control": "urn:schemas-upnp-org:control-1-0",
}

HTTP_TIMEOUT = 5
DISCOVERY_TIMEOUT = 30.0
