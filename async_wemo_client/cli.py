# -*- coding: utf-8 -*-
"""Interactive Wemo switch client."""
# pylint: disable=invalid-name

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, Optional, Sequence, Tuple

from async_wemo_client.aiohttp import AiohttpRequester
from async_wemo_client.client import WemoBasicEventService, WemoRequester
from async_wemo_client.config import WemoConfig, load_config
from async_wemo_client.const import SSDP_PORT
from async_wemo_client.exceptions import WemoError
from async_wemo_client.search import async_discover
from async_wemo_client.ssdp import build_wemo_search_packet

_LOGGER = logging.getLogger("wemo-toggle")
_LOGGER_LIB = logging.getLogger("async_wemo_client")
_LOGGER_TRAFFIC = logging.getLogger("async_wemo_client.traffic")


parser = argparse.ArgumentParser(
    description="Find a Belkin Wemo switch and toggle its state"
)
parser.add_argument("--debug", action="store_true", help="Show debug messages")
parser.add_argument("--debug-traffic", action="store_true", help="Show network traffic")
parser.add_argument(
    "--verbose", action="store_true", help="Show every discovery response"
)
parser.add_argument(
    "--strict", action="store_true", help="Be strict about invalid data received"
)
parser.add_argument(
    "--timeout",
    type=float,
    default=30,
    help="Seconds to wait for a device to respond, 0 to wait forever",
)
parser.add_argument(
    "--http-timeout", type=float, default=5, help="Timeout for control requests"
)
parser.add_argument("--bind", help="ip, e.g., 192.168.0.10")
parser.add_argument(
    "--target", help="ip[:port] to search, e.g., 239.255.255.250 or 127.0.0.1:8900"
)


def setup_logging(args: argparse.Namespace) -> None:
    """Set log levels from arguments."""
    logging.basicConfig()
    level = logging.DEBUG if args.debug else logging.ERROR
    _LOGGER.setLevel(level)
    _LOGGER_LIB.setLevel(level)
    _LOGGER_TRAFFIC.setLevel(logging.DEBUG if args.debug_traffic else logging.ERROR)


def config_from_args(args: argparse.Namespace) -> WemoConfig:
    """Build the configuration from arguments."""
    data: Dict[str, Any] = {
        "discovery_timeout": args.timeout or None,
        "http_timeout": args.http_timeout,
    }
    if args.bind:
        data["ssdp_source"] = (args.bind, 0)
    if args.target:
        target = args.target if ":" in args.target else f"{args.target}:{SSDP_PORT}"
        data["ssdp_target"] = target
    return load_config(data)


async def async_find_device(
    args: argparse.Namespace,
    config: WemoConfig,
    requester: Optional[WemoRequester] = None,
) -> Tuple[WemoBasicEventService, bool]:
    """Discover a device and show its state."""
    print("Wemo Test\n*********\n\n")

    packet = build_wemo_search_packet(config)
    print(f"[Searching via UDP]:\n{packet.decode()}")
    location = await async_discover(config, verbose=args.verbose, strict=args.strict)
    _LOGGER.debug("Discovered device at: %s", location)

    requester = requester or AiohttpRequester(config.http_timeout)
    service = WemoBasicEventService(requester, location, config, strict=args.strict)
    current_state = await service.async_get_binary_state()
    print(f"Found Belkin device at addr: {location}")
    print(f"Currently ON/OFF state [{current_state}]\n\n")
    return service, current_state


async def async_switch_state(service: WemoBasicEventService, state: bool) -> bool:
    """Switch the device to state and show the state it reports afterwards."""
    print(f"Setting ON/OFF state to [{state}]")
    await service.async_set_binary_state(state)

    new_state = await service.async_get_binary_state()
    print(f"New ON/OFF state [{new_state}]")
    return new_state


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Set up async loop and run the main program."""
    args = parser.parse_args(argv)
    setup_logging(args)

    try:
        config = config_from_args(args)
    except WemoError as err:
        print(f"*** {err}")
        sys.exit(1)

    # Prompts block the main thread between loop runs, so Ctrl-C reaches them.
    loop = asyncio.new_event_loop()
    try:
        service, current_state = loop.run_until_complete(
            async_find_device(args, config)
        )
        input("Hit <ENTER> to switch state\n")
        loop.run_until_complete(async_switch_state(service, not current_state))
        input("")
        print("Quitting...")
    except WemoError as err:
        _LOGGER.debug("Failed", exc_info=True)
        print(f"*** {err}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        loop.close()


if __name__ == "__main__":
    main()
