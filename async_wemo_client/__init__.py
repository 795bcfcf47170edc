# -*- coding: utf-8 -*-
"""Wemo module."""

from async_wemo_client.client import WemoBasicEventService  # noqa: F401
from async_wemo_client.client import WemoRequester  # noqa: F401
from async_wemo_client.config import DEFAULT_CONFIG  # noqa: F401
from async_wemo_client.config import WemoConfig  # noqa: F401
from async_wemo_client.exceptions import WemoError  # noqa: F401
from async_wemo_client.search import WemoSearchListener  # noqa: F401
from async_wemo_client.search import async_discover  # noqa: F401
