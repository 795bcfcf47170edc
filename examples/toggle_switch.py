#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Example to toggle the first Wemo switch found on the network.

You can run tests/dummy_wemo.py locally to emulate a switch, and change
the target below to ("127.0.0.1", 8900).
"""

import asyncio
import logging

from async_wemo_client.aiohttp import AiohttpRequester
from async_wemo_client.client import WemoBasicEventService
from async_wemo_client.config import load_config
from async_wemo_client.search import async_discover

logging.basicConfig(level=logging.INFO)


config = load_config({"ssdp_target": ("239.255.255.250", 1900)})


async def main():
    # find the switch
    base_url = await async_discover(config)
    print("Device: {}".format(base_url))

    # get the basic event service
    service = WemoBasicEventService(AiohttpRequester(), base_url, config)
    print("Service: {}".format(service))

    # toggle it
    state = await service.async_toggle()
    print("State: {}".format(state))


asyncio.run(main())
