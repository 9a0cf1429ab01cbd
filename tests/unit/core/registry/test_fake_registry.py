"""Tests for FakeRegistry (Layer 1: Fake Infrastructure Tests).

These tests verify the fake implementation itself works correctly.
They ensure the test infrastructure is reliable for higher-layer tests.
"""

import pytest

from cicfacts.core.registry.fake import FakeRegistry
from cicfacts.core.registry.types import KEY_READ, RegistryError, RegistryErrorKind, RegistryKey


def test_fake_registry_opens_configured_key() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {}})

    key = registry.open_key("SOFTWARE\\Vendor", KEY_READ)

    assert isinstance(key, RegistryKey)
    assert registry.open_calls == [("SOFTWARE\\Vendor", KEY_READ)]
    assert registry.open_keys == [key]


def test_fake_registry_parent_keys_exist_implicitly() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor\\Product\\Settings": {}})

    assert isinstance(registry.open_key("SOFTWARE\\Vendor", KEY_READ), RegistryKey)
    assert isinstance(registry.open_key("SOFTWARE", KEY_READ), RegistryKey)


def test_fake_registry_sibling_prefix_is_not_parent() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\VendorX": {}})

    result = registry.open_key("SOFTWARE\\Vendor", KEY_READ)

    assert isinstance(result, RegistryError)
    assert result.kind is RegistryErrorKind.NOT_FOUND


def test_fake_registry_paths_are_case_insensitive() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {"Site": "HQ"}})

    key = registry.open_key("software\\VENDOR\\", KEY_READ)

    assert isinstance(key, RegistryKey)
    value = registry.read_value(key, "SITE")
    assert not isinstance(value, RegistryError)
    assert value.data == ("HQ",)


def test_fake_registry_missing_key_returns_not_found() -> None:
    registry = FakeRegistry()

    result = registry.open_key("SOFTWARE\\Missing", KEY_READ)

    assert isinstance(result, RegistryError)
    assert result.kind is RegistryErrorKind.NOT_FOUND
    assert result.path == "SOFTWARE\\Missing"
    assert registry.open_keys == []


def test_fake_registry_denied_key_returns_access_denied() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Secret": {}}, denied={"SOFTWARE\\Secret"})

    result = registry.open_key("SOFTWARE\\Secret", KEY_READ)

    assert isinstance(result, RegistryError)
    assert result.kind is RegistryErrorKind.ACCESS_DENIED


def test_fake_registry_reads_multi_string_in_order() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {"SITE": ["B", "A"]}})
    key = registry.open_key("SOFTWARE\\Vendor", KEY_READ)
    assert isinstance(key, RegistryKey)

    value = registry.read_value(key, "SITE")

    assert not isinstance(value, RegistryError)
    assert value.data == ("B", "A")
    assert value.first == "B"


def test_fake_registry_missing_value_returns_not_found() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {}})
    key = registry.open_key("SOFTWARE\\Vendor", KEY_READ)
    assert isinstance(key, RegistryKey)

    result = registry.read_value(key, "SITE")

    assert isinstance(result, RegistryError)
    assert result.kind is RegistryErrorKind.NOT_FOUND
    assert result.name == "SITE"


def test_fake_registry_read_after_close_raises() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {"SITE": "HQ"}})
    key = registry.open_key("SOFTWARE\\Vendor", KEY_READ)
    assert isinstance(key, RegistryKey)
    registry.close_key(key)

    with pytest.raises(ValueError, match="Key is not open"):
        registry.read_value(key, "SITE")


def test_fake_registry_double_close_raises() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {}})
    key = registry.open_key("SOFTWARE\\Vendor", KEY_READ)
    assert isinstance(key, RegistryKey)
    registry.close_key(key)

    with pytest.raises(ValueError, match="Key is not open"):
        registry.close_key(key)


def test_open_context_manager_closes_key_on_exception() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor": {}})

    with pytest.raises(RuntimeError):
        with registry.open("SOFTWARE\\Vendor", KEY_READ) as key:
            assert isinstance(key, RegistryKey)
            raise RuntimeError("boom")

    assert registry.open_keys == []
    assert len(registry.closed_keys) == 1


def test_open_context_manager_yields_error_without_closing() -> None:
    registry = FakeRegistry()

    with registry.open("SOFTWARE\\Missing", KEY_READ) as key:
        assert isinstance(key, RegistryError)

    assert registry.closed_keys == []


def test_fake_registry_interior_empty_segment_is_not_found() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Vendor\\Root": {}})

    result = registry.open_key("SOFTWARE\\Vendor\\\\Root", KEY_READ)

    assert isinstance(result, RegistryError)
    assert result.kind is RegistryErrorKind.NOT_FOUND


def test_fake_registry_unavailable_key_returns_unavailable() -> None:
    registry = FakeRegistry(keys={"SOFTWARE\\Broken": {}}, unavailable={"software\\broken"})

    result = registry.open_key("SOFTWARE\\Broken", KEY_READ)

    assert isinstance(result, RegistryError)
    assert result.kind is RegistryErrorKind.UNAVAILABLE
    assert registry.open_keys == []
