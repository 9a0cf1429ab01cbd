"""Configuration data structures and loading.

Provides immutable config data loaded from ~/.cicfacts/config.toml (or the
file named by CICFACTS_CONFIG). Loaded once at the CLI entry point.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from cicfacts.core.license_probe import DEFAULT_VENDOR
from cicfacts.core.registry.types import HKEY_LOCAL_MACHINE, SUPPORTED_HIVES

CONFIG_PATH_ENV = "CICFACTS_CONFIG"
CONFIG_KEYS = ("vendor", "hive")


@dataclass(frozen=True)
class CicfactsConfig:
    """Immutable configuration data.

    All fields are read-only after construction.
    """

    vendor: str = DEFAULT_VENDOR
    hive: str = HKEY_LOCAL_MACHINE


def parse_config(data: dict[str, object], source: Path) -> CicfactsConfig:
    """Build a config from parsed TOML data.

    Args:
        data: Parsed TOML document
        source: File the data came from (for error messages)

    Raises:
        ValueError: If a value has the wrong type or an unknown hive is named
    """
    vendor = data.get("vendor", DEFAULT_VENDOR)
    if not isinstance(vendor, str) or not vendor:
        raise ValueError(f"'vendor' must be a non-empty string in {source}")

    hive = data.get("hive", HKEY_LOCAL_MACHINE)
    if hive not in SUPPORTED_HIVES:
        raise ValueError(f"Unknown registry hive {hive!r} in {source}")

    return CicfactsConfig(vendor=vendor, hive=str(hive))


class ConfigStore(ABC):
    """Abstract interface for config operations.

    Provides dependency injection for config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if config exists."""
        ...

    @abstractmethod
    def load(self) -> CicfactsConfig:
        """Load config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: CicfactsConfig) -> None:
        """Save config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...

    def load_or_default(self) -> CicfactsConfig:
        """Load config, falling back to defaults when none exists."""
        if not self.exists():
            return CicfactsConfig()
        return self.load()


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.cicfacts/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> CicfactsConfig:
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e
        return parse_config(data, config_path)

    def save(self, config: CicfactsConfig) -> None:
        """Save config, preserving comments and unrelated keys already in the file."""
        config_path = self.path()

        if config_path.exists():
            with config_path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("cicfacts configuration"))

        doc["vendor"] = config.vendor
        doc["hive"] = config.hive

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        return Path.home() / ".cicfacts" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: CicfactsConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> CicfactsConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def save(self, config: CicfactsConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/cicfacts/config.toml")
