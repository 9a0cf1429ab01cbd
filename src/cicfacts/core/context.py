"""Application context with dependency injection."""

from dataclasses import dataclass

from cicfacts.core.config_store import (
    CicfactsConfig,
    ConfigStore,
    FilesystemConfigStore,
    InMemoryConfigStore,
)
from cicfacts.core.platform import FakePlatform, Platform, RealPlatform
from cicfacts.core.registry.abc import Registry
from cicfacts.core.registry.real import RealRegistry


@dataclass(frozen=True)
class CicfactsContext:
    """Immutable context holding all dependencies for cicfacts operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: Registry
    platform: Platform
    config_store: ConfigStore
    config: CicfactsConfig

    @staticmethod
    def for_test(
        registry: Registry | None = None,
        platform: Platform | None = None,
        config_store: ConfigStore | None = None,
        config: CicfactsConfig | None = None,
    ) -> "CicfactsContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            registry: Optional Registry. If None, creates empty FakeRegistry.
            platform: Optional Platform. If None, creates a Windows FakePlatform.
            config_store: Optional ConfigStore. If None, creates InMemoryConfigStore
                          holding `config`.
            config: Optional config. If None, uses the store's config or defaults.

        Returns:
            CicfactsContext wired with in-memory implementations

        Example:
            >>> registry = FakeRegistry(keys={...})
            >>> ctx = CicfactsContext.for_test(registry=registry)
            >>> result = runner.invoke(cli, ["fact"], obj=ctx)
        """
        from cicfacts.core.registry.fake import FakeRegistry

        if config_store is None:
            config_store = InMemoryConfigStore(config=config)
        if config is None:
            config = config_store.load_or_default()

        return CicfactsContext(
            registry=registry if registry is not None else FakeRegistry(),
            platform=platform if platform is not None else FakePlatform(),
            config_store=config_store,
            config=config,
        )


def create_context() -> CicfactsContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ValueError: If the config file is malformed
    """
    config_store = FilesystemConfigStore()
    config = config_store.load_or_default()

    return CicfactsContext(
        registry=RealRegistry(hive=config.hive),
        platform=RealPlatform(),
        config_store=config_store,
        config=config,
    )
