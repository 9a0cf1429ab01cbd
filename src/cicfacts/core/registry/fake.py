"""Fake registry operations for testing.

FakeRegistry is an in-memory implementation that accepts pre-configured
state in its constructor. Construct instances directly with keyword arguments.
"""

from cicfacts.core.registry.abc import Registry
from cicfacts.core.registry.types import (
    RegistryError,
    RegistryErrorKind,
    RegistryKey,
    RegistryValue,
)


def _normalize(path: str) -> str:
    # Case-insensitive; leading and trailing separators are ignored, interior
    # empty segments are kept so such paths never match a configured key
    return path.strip("\\").casefold()


class FakeRegistry(Registry):
    """In-memory fake implementation of registry operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty).

    Parent keys of every configured key exist implicitly, as they do in a
    real registry.

    Example:
        >>> registry = FakeRegistry(
        ...     keys={
        ...         r"SOFTWARE\\Vendor\\Root": {"SITE": "HQ"},
        ...         r"SOFTWARE\\Vendor\\Root\\HQ\\Licenses\\FEATURE": {},
        ...     },
        ...     denied={r"SOFTWARE\\Vendor\\Secret"},
        ...     unavailable={r"SOFTWARE\\Vendor\\Broken"},
        ... )
    """

    def __init__(
        self,
        *,
        keys: dict[str, dict[str, str | list[str]]] | None = None,
        denied: set[str] | None = None,
        unavailable: set[str] | None = None,
    ) -> None:
        """Create FakeRegistry with pre-configured state.

        Args:
            keys: Mapping of key path -> {value name -> data}. A list models
                  a REG_MULTI_SZ value.
            denied: Key paths whose open fails with ACCESS_DENIED
            unavailable: Key paths whose open fails with UNAVAILABLE (store-level failure)
        """
        self._keys: dict[str, dict[str, str | list[str]]] = {}
        for path, values in (keys or {}).items():
            self._keys[_normalize(path)] = {name.casefold(): data for name, data in values.items()}
        self._denied = {_normalize(path) for path in (denied or set())}
        self._unavailable = {_normalize(path) for path in (unavailable or set())}
        self._open_calls: list[tuple[str, int]] = []
        self._closed_keys: list[RegistryKey] = []
        self._open_keys: list[RegistryKey] = []

    @property
    def open_calls(self) -> list[tuple[str, int]]:
        """Get the list of (path, access) passed to open_key().

        This property is for test assertions only.
        """
        return self._open_calls

    @property
    def closed_keys(self) -> list[RegistryKey]:
        """Get the keys released through close_key().

        This property is for test assertions only.
        """
        return self._closed_keys

    @property
    def open_keys(self) -> list[RegistryKey]:
        """Get keys opened but not yet closed.

        This property is for test assertions only.
        """
        return self._open_keys

    def _key_exists(self, normalized: str) -> bool:
        if normalized in self._keys:
            return True
        prefix = normalized + "\\"
        return any(path.startswith(prefix) for path in self._keys)

    def open_key(self, path: str, access: int) -> RegistryKey | RegistryError:
        self._open_calls.append((path, access))
        normalized = _normalize(path)

        if normalized in self._denied:
            return RegistryError(
                kind=RegistryErrorKind.ACCESS_DENIED,
                path=path,
                name=None,
                message="Access is denied.",
            )
        if normalized in self._unavailable:
            return RegistryError(
                kind=RegistryErrorKind.UNAVAILABLE,
                path=path,
                name=None,
                message="The configuration registry database is corrupt.",
            )
        if not self._key_exists(normalized):
            return RegistryError(
                kind=RegistryErrorKind.NOT_FOUND,
                path=path,
                name=None,
                message="The system cannot find the file specified.",
            )

        key = RegistryKey(path=path, access=access)
        self._open_keys.append(key)
        return key

    def read_value(self, key: RegistryKey, name: str) -> RegistryValue | RegistryError:
        if key not in self._open_keys:
            raise ValueError(f"Key is not open: {key.path}")

        values = self._keys.get(_normalize(key.path), {})
        data = values.get(name.casefold())
        if data is None:
            return RegistryError(
                kind=RegistryErrorKind.NOT_FOUND,
                path=key.path,
                name=name,
                message="The system cannot find the file specified.",
            )
        if isinstance(data, list):
            return RegistryValue(name=name, data=tuple(data))
        return RegistryValue(name=name, data=(data,))

    def close_key(self, key: RegistryKey) -> None:
        if key not in self._open_keys:
            raise ValueError(f"Key is not open: {key.path}")
        self._open_keys.remove(key)
        self._closed_keys.append(key)
