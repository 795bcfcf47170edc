"""Wemo test requester and canned responses."""

import asyncio
from collections import deque
from copy import deepcopy
from typing import Deque, List, Mapping, MutableMapping, Optional, Tuple, cast

from async_wemo_client.client import WemoRequester

from .common import (
    GET_BINARY_STATE_RESPONSE_FMT,
    SET_BINARY_STATE_RESPONSE_FMT,
    WEMO_CONTROL_URL,
)

ResponseKey = Tuple[str, str, str]
Response = Tuple[int, Mapping[str, str], str]


class WemoTestRequester(WemoRequester):
    """Test requester, keyed on method, url and SOAP action."""

    # pylint: disable=too-few-public-methods

    def __init__(self, response_map: Mapping[ResponseKey, Response]) -> None:
        """Class initializer."""
        self.response_map: MutableMapping[ResponseKey, Response] = deepcopy(
            cast(MutableMapping, response_map)
        )
        self.exceptions: Deque[Optional[Exception]] = deque()
        self.requests: List[Tuple[str, str, Mapping[str, str], Optional[str]]] = []

    async def async_http_request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> Tuple[int, Mapping, str]:
        """Do a HTTP request."""
        await asyncio.sleep(0.01)
        self.requests.append((method, url, headers or {}, body))

        if self.exceptions:
            exception = self.exceptions.popleft()
            if exception is not None:
                raise exception

        soap_action = (headers or {}).get("SOAPACTION", "").strip('"')
        key = (method, url, soap_action.split("#")[-1])
        if key not in self.response_map:
            raise KeyError(f"Request not in response map: {key}")

        return self.response_map[key]


RESPONSE_MAP: Mapping[ResponseKey, Response] = {
    ("POST", WEMO_CONTROL_URL, "GetBinaryState"): (
        200,
        {},
        GET_BINARY_STATE_RESPONSE_FMT.format(state="0"),
    ),
    ("POST", WEMO_CONTROL_URL, "SetBinaryState"): (
        200,
        {},
        SET_BINARY_STATE_RESPONSE_FMT.format(state="1"),
    ),
}
