"""Common test parts."""

WEMO_BASE_URL = "http://192.168.1.10:49153"
WEMO_CONTROL_URL = WEMO_BASE_URL + "/upnp/control/basicevent1"

SEARCH_REQUEST = (
    b"M-SEARCH * HTTP/1.1\r\n"
    b"HOST: 239.255.255.250:1900\r\n"
    b'MAN: "ssdp:discover"\r\n'
    b"MX: 5\r\n"
    b"ST: ssdp:all\r\n"
    b"\r\n"
)

SEARCH_RESPONSE_WEMO = (
    b"HTTP/1.1 200 OK\r\n"
    b"CACHE-CONTROL: max-age=86400\r\n"
    b"DATE: Fri, 01 Jan 2021 12:00:00 GMT\r\n"
    b"EXT:\r\n"
    b"LOCATION: http://192.168.1.10:49153/setup.xml\r\n"
    b'OPT: "http://schemas.upnp.org/upnp/1/0/"; ns=01\r\n'
    b"01-NLS: 905bfa3c-1dd2-11b2-8928-fd8aebaf491c\r\n"
    b"SERVER: Unspecified, UPnP/1.0, Unspecified\r\n"
    b"X-User-Agent: redsonic\r\n"
    b"ST: urn:Belkin:service:basicevent:1\r\n"
    b"USN: uuid:Socket-1_0-221517K0101769::urn:Belkin:service:basicevent:1\r\n"
    b"\r\n"
)

SEARCH_RESPONSE_WEMO_NO_LOCATION = (
    b"HTTP/1.1 200 OK\r\n"
    b"CACHE-CONTROL: max-age=86400\r\n"
    b"EXT:\r\n"
    b"SERVER: Unspecified, UPnP/1.0, Unspecified\r\n"
    b"X-User-Agent: Belkin\r\n"
    b"ST: urn:Belkin:device:controllee:1\r\n"
    b"USN: uuid:Socket-1_0-221517K0101769::upnp:rootdevice\r\n"
    b"X-Description: setup.xml\r\n"
    b"\r\n"
)

SEARCH_RESPONSE_ROUTER = (
    b"HTTP/1.1 200 OK\r\n"
    b"Cache-Control: max-age=1900\r\n"
    b"Location: http://192.168.1.1:80/RootDevice.xml\r\n"
    b"Server: UPnP/1.0 UPnP/1.0 UPnP-Device-Host/1.0\r\n"
    b"ST:urn:schemas-upnp-org:service:WANCommonInterfaceConfig:1\r\n"
    b"USN: uuid:...::WANCommonInterfaceConfig:1\r\n"
    b"EXT:\r\n\r\n"
)

GET_BINARY_STATE_RESPONSE_FMT = (
    '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
    's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/"><s:Body>\r\n'
    '<u:GetBinaryStateResponse xmlns:u="urn:Belkin:service:basicevent:1">\r\n'
    "<BinaryState>{state}</BinaryState>\r\n"
    "</u:GetBinaryStateResponse>\r\n"
    "</s:Body> </s:Envelope>"
)

SET_BINARY_STATE_RESPONSE_FMT = (
    '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
    's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/"><s:Body>\r\n'
    '<u:SetBinaryStateResponse xmlns:u="urn:Belkin:service:basicevent:1">\r\n'
    "<BinaryState>{state}</BinaryState>\r\n"
    "<CountdownEndTime>0</CountdownEndTime>\r\n"
    "<deviceCurrentTime>1609502400</deviceCurrentTime>\r\n"
    "</u:SetBinaryStateResponse>\r\n"
    "</s:Body> </s:Envelope>"
)

SOAP_FAULT_RESPONSE = (
    '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
    's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/"><s:Body>\r\n'
    "<s:Fault>\r\n"
    "<faultcode>s:Client</faultcode>\r\n"
    "<faultstring>UPnPError</faultstring>\r\n"
    "<detail>\r\n"
    '<UPnPError xmlns="urn:schemas-upnp-org:control-1-0">\r\n'
    "<errorCode>-1</errorCode>\r\n"
    "<errorDescription>Invalid Action</errorDescription>\r\n"
    "</UPnPError>\r\n"
    "</detail>\r\n"
    "</s:Fault>\r\n"
    "</s:Body> </s:Envelope>"
)
