from cicfacts.core.registry.abc import Registry
from cicfacts.core.registry.real import RealRegistry
from cicfacts.core.registry.types import (
    HKEY_LOCAL_MACHINE,
    KEY_READ,
    KEY_WOW64_64KEY,
    RegistryError,
    RegistryErrorKind,
    RegistryKey,
    RegistryValue,
    join_path,
)

__all__ = [
    "HKEY_LOCAL_MACHINE",
    "KEY_READ",
    "KEY_WOW64_64KEY",
    "RealRegistry",
    "Registry",
    "RegistryError",
    "RegistryErrorKind",
    "RegistryKey",
    "RegistryValue",
    "join_path",
]
