"""Unit tests for utils."""

from async_wemo_client.utils import (
    CaseInsensitiveDict,
    format_numbered_lines,
    split_lines,
    strip_suffix,
)


def test_case_insensitive_dict() -> None:
    """Test CaseInsensitiveDict."""
    ci_dict = CaseInsensitiveDict()
    ci_dict["Key"] = "value"
    assert ci_dict["Key"] == "value"
    assert ci_dict["key"] == "value"
    assert ci_dict["KEY"] == "value"
    assert "kEy" in ci_dict

    assert CaseInsensitiveDict(key="value") == {"key": "value"}
    assert CaseInsensitiveDict({"key": "value"}, key="override_value") == {
        "key": "override_value"
    }


def test_case_insensitive_dict_case_change() -> None:
    """Test setting a key with a different case replaces it."""
    ci_dict = CaseInsensitiveDict(LOCATION="a")
    ci_dict["Location"] = "b"
    assert len(ci_dict) == 1
    assert list(ci_dict) == ["Location"]

    del ci_dict["location"]
    assert not ci_dict


def test_case_insensitive_dict_equality() -> None:
    """Test CaseInsensitiveDict equality."""
    assert CaseInsensitiveDict(key="value") == CaseInsensitiveDict(KEY="value")


def test_split_lines() -> None:
    """Test splitting on CRLF only."""
    assert split_lines("a\r\nb\nc\r\n") == ["a", "b\nc", ""]


def test_strip_suffix() -> None:
    """Test stripping a suffix."""
    assert strip_suffix("http://h/setup.xml", "/setup.xml") == "http://h"
    assert strip_suffix("http://h/other.xml", "/setup.xml") == "http://h/other.xml"
    assert strip_suffix("value", "") == "value"


def test_format_numbered_lines() -> None:
    """Test numbering lines."""
    assert format_numbered_lines("HTTP/1.1 200 OK\r\nEXT:") == (
        " 0: HTTP/1.1 200 OK\r\n 1: EXT:"
    )
