"""Type definitions for registry operations."""

from dataclasses import dataclass
from enum import Enum

# Access masks passed to open_key(). KEY_WOW64_64KEY is the 0x100 view flag.
KEY_READ = 0x20019
KEY_WOW64_64KEY = 0x0100

HKEY_LOCAL_MACHINE = "HKEY_LOCAL_MACHINE"
SUPPORTED_HIVES = (
    "HKEY_CLASSES_ROOT",
    "HKEY_CURRENT_USER",
    HKEY_LOCAL_MACHINE,
    "HKEY_USERS",
    "HKEY_CURRENT_CONFIG",
)


class RegistryErrorKind(Enum):
    """Why a registry operation failed."""

    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class RegistryError:
    """Failure of a registry operation, returned instead of raised."""

    kind: RegistryErrorKind
    path: str
    name: str | None  # value name for read_value() failures, None for keys
    message: str


@dataclass(frozen=True)
class RegistryKey:
    """Handle to an open registry key.

    `handle` is implementation specific: a winreg HKEY for the real
    registry, None for the fake.
    """

    path: str
    access: int
    handle: object = None


@dataclass(frozen=True)
class RegistryValue:
    """Value read from a key, normalized to its string candidates."""

    name: str
    data: tuple[str, ...]

    @property
    def first(self) -> str | None:
        """First candidate string in store order, or None if there is none."""
        if not self.data:
            return None
        return self.data[0]


def join_path(*segments: str) -> str:
    """Join path segments with backslashes, dropping stray separators."""
    return "\\".join(segment.strip("\\") for segment in segments if segment.strip("\\"))
