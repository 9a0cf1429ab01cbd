"""Registry operations interface.

Reads go through this ABC so the license probe can run against an
in-memory fake in tests and against winreg on Windows hosts.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from cicfacts.core.registry.types import RegistryError, RegistryKey, RegistryValue


class Registry(ABC):
    """Abstract read-only registry operations.

    Failures are reported as RegistryError values, never raised: a missing
    key is an ordinary outcome for callers, not an exceptional one.
    """

    @abstractmethod
    def open_key(self, path: str, access: int) -> RegistryKey | RegistryError:
        """Open a key for reading.

        Args:
            path: Backslash-delimited key path below the hive
            access: Access mask (e.g. KEY_READ | KEY_WOW64_64KEY)

        Returns:
            An open RegistryKey, or RegistryError if the key does not exist,
            access is denied, or the store fails
        """
        ...

    @abstractmethod
    def read_value(self, key: RegistryKey, name: str) -> RegistryValue | RegistryError:
        """Read a named value from an open key.

        Args:
            key: Key previously returned by open_key()
            name: Value name

        Returns:
            RegistryValue with the string candidates, or RegistryError
        """
        ...

    @abstractmethod
    def close_key(self, key: RegistryKey) -> None:
        """Release a key returned by open_key()."""
        ...

    @contextmanager
    def open(self, path: str, access: int) -> Iterator[RegistryKey | RegistryError]:
        """Open a key for the duration of a with-block.

        Yields the open key (or the RegistryError) and closes the key on
        every exit path.

        Example:
            >>> with registry.open(path, KEY_READ) as key:
            ...     if isinstance(key, RegistryError):
            ...         return None
            ...     value = registry.read_value(key, "SITE")
        """
        key = self.open_key(path, access)
        try:
            yield key
        finally:
            if isinstance(key, RegistryKey):
                self.close_key(key)
