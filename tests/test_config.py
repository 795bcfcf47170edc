"""Unit tests for config."""

import pytest

from async_wemo_client.config import DEFAULT_CONFIG, WemoConfig, load_config
from async_wemo_client.exceptions import WemoConfigError


def test_default_config() -> None:
    """Test the defaults."""
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config.ssdp_target == ("239.255.255.250", 1900)
    assert config.ssdp_mx == 5
    assert config.search_target == "ssdp:all"
    assert config.datagram_size == 4096
    assert config.control_path == "/upnp/control/basicevent1"
    assert config.service_type == "urn:Belkin:service:basicevent:1"


def test_load_config_overrides() -> None:
    """Test overriding settings."""
    config = load_config(
        {
            "ssdp_target": "127.0.0.1:8900",
            "ssdp_source": ["127.0.0.1", "0"],
            "http_timeout": "2.5",
            "discovery_timeout": None,
        }
    )
    assert config.ssdp_target == ("127.0.0.1", 8900)
    assert config.ssdp_source == ("127.0.0.1", 0)
    assert config.http_timeout == 2.5
    assert config.discovery_timeout is None
    assert config.ssdp_mx == DEFAULT_CONFIG.ssdp_mx


def test_load_config_base() -> None:
    """Test merging over another config."""
    base = WemoConfig(ssdp_mx=3)
    config = load_config({"search_target": "urn:Belkin:device:controllee:1"}, base)
    assert config.ssdp_mx == 3
    assert config.search_target == "urn:Belkin:device:controllee:1"


@pytest.mark.parametrize(
    "data",
    [
        {"ssdp_target": "239.255.255.250"},
        {"ssdp_target": ("239.255.255.250", 70000)},
        {"ssdp_mx": 0},
        {"datagram_size": 10},
        {"control_path": "upnp/control/basicevent1"},
        {"service_type": "Belkin:service:basicevent:1"},
        {"http_timeout": 0},
        {"unknown": 1},
    ],
)
def test_load_config_invalid(data: dict) -> None:
    """Test invalid settings are rejected."""
    with pytest.raises(WemoConfigError):
        load_config(data)
