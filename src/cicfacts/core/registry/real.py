"""Production registry operations using the stdlib winreg module.

winreg only exists on Windows, so it is imported inside each method. The
module stays importable everywhere; facts using it are confined to Windows.
"""

import logging

from cicfacts.core.registry.abc import Registry
from cicfacts.core.registry.types import (
    HKEY_LOCAL_MACHINE,
    SUPPORTED_HIVES,
    RegistryError,
    RegistryErrorKind,
    RegistryKey,
    RegistryValue,
)

logger = logging.getLogger(__name__)


def _error_kind(error: OSError) -> RegistryErrorKind:
    if isinstance(error, FileNotFoundError):
        return RegistryErrorKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return RegistryErrorKind.ACCESS_DENIED
    return RegistryErrorKind.UNAVAILABLE


def normalize_value_data(data: object) -> tuple[str, ...]:
    """Convert winreg value data into string candidates.

    REG_MULTI_SZ arrives as a list and keeps its order. REG_NONE and empty
    values (None) and binary data (bytes) carry no string and give no
    candidate. Every other type becomes a single candidate.
    """
    if data is None or isinstance(data, (bytes, bytearray)):
        return ()
    if isinstance(data, list):
        return tuple(str(item) for item in data)
    return (str(data),)


class RealRegistry(Registry):
    """Registry operations backed by winreg.

    Example:
        >>> registry = RealRegistry()
        >>> with registry.open(r"SOFTWARE\\Microsoft", KEY_READ) as key:
        ...     ...
    """

    def __init__(self, hive: str = HKEY_LOCAL_MACHINE) -> None:
        """Create registry operations rooted at a hive.

        Args:
            hive: winreg hive constant name (e.g. "HKEY_LOCAL_MACHINE")

        Raises:
            ValueError: If hive is not a known hive name
        """
        if hive not in SUPPORTED_HIVES:
            raise ValueError(f"Unknown registry hive: {hive}")
        self._hive = hive

    @property
    def hive(self) -> str:
        return self._hive

    def open_key(self, path: str, access: int) -> RegistryKey | RegistryError:
        import winreg

        try:
            handle = winreg.OpenKey(getattr(winreg, self._hive), path, 0, access)
        except OSError as e:
            logger.debug("OpenKey failed for %s\\%s: %s", self._hive, path, e)
            return RegistryError(kind=_error_kind(e), path=path, name=None, message=str(e))
        return RegistryKey(path=path, access=access, handle=handle)

    def read_value(self, key: RegistryKey, name: str) -> RegistryValue | RegistryError:
        import winreg

        try:
            data, _value_type = winreg.QueryValueEx(key.handle, name)
        except OSError as e:
            logger.debug("QueryValueEx failed for %s [%s]: %s", key.path, name, e)
            return RegistryError(kind=_error_kind(e), path=key.path, name=name, message=str(e))
        return RegistryValue(name=name, data=normalize_value_data(data))

    def close_key(self, key: RegistryKey) -> None:
        import winreg

        winreg.CloseKey(key.handle)
