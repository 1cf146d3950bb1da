from __future__ import annotations

from homegraph_bridge.domain.entities.device import DeviceInfo
from homegraph_bridge.domain.services.device_builder import (
    build_device_info,
    join_comma_list,
    parse_comma_list,
)


def test_parse_comma_list_trims_and_drops_empty_entries() -> None:
    assert parse_comma_list(" Lamp, Desk lamp ,, ") == ["Lamp", "Desk lamp"]


def test_parse_comma_list_keeps_order_and_duplicates() -> None:
    assert parse_comma_list("b,a,b") == ["b", "a", "b"]


def test_parse_comma_list_handles_missing_input() -> None:
    assert parse_comma_list(None) == []
    assert parse_comma_list("") == []
    assert parse_comma_list(" , ") == []


def test_join_comma_list_is_the_inverse() -> None:
    names = ["Lamp", "Desk lamp"]
    assert parse_comma_list(join_comma_list(names)) == names
    assert join_comma_list(None) == ""


def test_build_device_info_is_none_when_all_empty() -> None:
    assert build_device_info() is None
    assert build_device_info("", " ", None, "") is None


def test_build_device_info_turns_empty_strings_into_none() -> None:
    info = build_device_info(manufacturer="Acme", model="", sw_version=" 2.0 ")
    assert info == DeviceInfo(manufacturer="Acme", model=None, sw_version="2.0")
