# -*- coding: utf-8 -*-
"""Utils for async_wemo_client."""

from collections.abc import Mapping as abcMapping
from collections.abc import MutableMapping as abcMutableMapping
from typing import Any, Dict, Iterator, List, Optional, Tuple


class CaseInsensitiveDict(abcMutableMapping):
    """
    Headers of a decoded SSDP datagram.

    Lookups ignore case; iteration yields the keys as last written.
    """

    def __init__(self, data: Optional[abcMapping] = None, **kwargs: Any) -> None:
        """Initialize."""
        self._items: Dict[str, Tuple[str, Any]] = {}
        self.update({**(data or {}), **kwargs})

    def as_lower_dict(self) -> Dict[str, Any]:
        """Return the headers with lowercase keys."""
        return {lower_key: value for lower_key, (_, value) in self._items.items()}

    def __setitem__(self, key: str, value: Any) -> None:
        """Set item, replacing a key of different case."""
        self._items[key.lower()] = (key, value)

    def __getitem__(self, key: str) -> Any:
        """Get item."""
        return self._items[key.lower()][1]

    def __delitem__(self, key: str) -> None:
        """Del item."""
        del self._items[key.lower()]

    def __len__(self) -> int:
        """Get length."""
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Get iterator."""
        return (key for key, _ in self._items.values())

    def __repr__(self) -> str:
        """Repr."""
        return repr(dict(self._items.values()))

    def __eq__(self, other: Any) -> bool:
        """Compare for equality, ignoring case of keys."""
        if not isinstance(other, abcMapping):
            return NotImplemented
        return self.as_lower_dict() == {
            key.lower(): value for key, value in other.items()
        }


def split_lines(message: str) -> List[str]:
    """Split a message on CRLF, the line separator of SSDP and Wemo SOAP."""
    return message.split("\r\n")


def strip_suffix(value: str, suffix: str) -> str:
    """Strip suffix from value, if present."""
    if suffix and value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def format_numbered_lines(message: str) -> str:
    """Format a message as numbered lines, e.g. for dumping a datagram."""
    return "\r\n".join(
        f"{index:2d}: {line}" for index, line in enumerate(split_lines(message))
    )
