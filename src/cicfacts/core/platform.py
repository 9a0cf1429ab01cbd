"""Host platform detection used for fact confinement."""

import platform
from abc import ABC, abstractmethod


class Platform(ABC):
    """Abstract host platform facts for dependency injection."""

    @abstractmethod
    def osfamily(self) -> str:
        """Return the operating system family (e.g. "Windows", "Linux", "Darwin")."""
        ...


class RealPlatform(Platform):
    """Production implementation using platform.system()."""

    def osfamily(self) -> str:
        return platform.system()


class FakePlatform(Platform):
    """In-memory fake with a fixed operating system family."""

    def __init__(self, *, osfamily: str = "Windows") -> None:
        self._osfamily = osfamily

    def osfamily(self) -> str:
        return self._osfamily
