"""
Dialect registry.

Adapters register themselves under a dialect id when their module is imported.
Registration checks the class against the adapter contract, so a dialect that
is listed can always be instantiated and described without a connection.
"""

import logging
from dataclasses import asdict
from typing import Any

from .base import AdapterConfig, DialectAdapter, DialectCapabilities


class AdapterRegistry:
    """Dialect id to adapter class mapping."""

    def __init__(self):
        self._adapters: dict[str, type[DialectAdapter]] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def _normalize(dialect: str) -> str:
        return dialect.strip().lower()

    def register(self, dialect: str, adapter_class: type[DialectAdapter]) -> None:
        """
        Register an adapter class under a dialect id.

        Raises:
            TypeError: If the class is not a concrete DialectAdapter with capabilities
            ValueError: If the dialect id is empty
        """
        if not isinstance(adapter_class, type) or not issubclass(adapter_class, DialectAdapter):
            raise TypeError(f"{adapter_class!r} is not a DialectAdapter subclass")
        if getattr(adapter_class, "__abstractmethods__", None):
            missing = sorted(adapter_class.__abstractmethods__)
            raise TypeError(f"{adapter_class.__name__} does not implement {missing}")
        if not isinstance(getattr(adapter_class, "capabilities", None), DialectCapabilities):
            raise TypeError(f"{adapter_class.__name__} declares no DialectCapabilities")

        key = self._normalize(dialect)
        if not key:
            raise ValueError("Dialect id must not be empty")

        previous = self._adapters.get(key)
        if previous is not None and previous is not adapter_class:
            self.logger.warning(
                f"Dialect {key} re-registered: {previous.__name__} -> {adapter_class.__name__}"
            )
        self._adapters[key] = adapter_class
        self.logger.debug(f"Registered dialect {key} -> {adapter_class.__name__}")

    def get_adapter_class(self, dialect: str) -> type[DialectAdapter] | None:
        return self._adapters.get(self._normalize(dialect))

    def get_capabilities(self, dialect: str) -> DialectCapabilities:
        """Capabilities of a registered dialect, read from the class."""
        return self._require(dialect).capabilities

    def _require(self, dialect: str) -> type[DialectAdapter]:
        adapter_class = self.get_adapter_class(dialect)
        if adapter_class is None:
            raise ValueError(
                f"Unsupported database type: {dialect}. Supported types: {self.list_adapters()}"
            )
        return adapter_class

    def create_adapter(self, config: AdapterConfig | dict[str, Any] | str) -> DialectAdapter:
        """
        Create an adapter from an AdapterConfig, a config dict or a bare dialect id.

        Raises:
            ValueError: If the type is missing or not registered
        """
        if isinstance(config, str):
            config = {"type": config}
        elif isinstance(config, AdapterConfig):
            config = asdict(config)

        dialect = config.get("type")
        if not dialect:
            raise ValueError("Database type is required")

        return self._require(dialect)(config)

    def list_adapters(self) -> list[str]:
        return sorted(self._adapters)

    def is_supported(self, dialect: str) -> bool:
        return self._normalize(dialect) in self._adapters


# Global registry instance
_registry = AdapterRegistry()


def register_adapter(dialect: str, adapter_class: type[DialectAdapter]) -> None:
    """Register an adapter with the global registry."""
    _registry.register(dialect, adapter_class)


def get_adapter(config: AdapterConfig | dict[str, Any] | str) -> DialectAdapter:
    """Get an adapter instance from the global registry."""
    return _registry.create_adapter(config)


def get_dialect_capabilities(dialect: str) -> DialectCapabilities:
    """Get the capabilities of a registered dialect without creating an adapter."""
    return _registry.get_capabilities(dialect)


def list_available_adapters() -> list[str]:
    """Get the registered dialect ids."""
    return _registry.list_adapters()


def is_adapter_supported(dialect: str) -> bool:
    """Check if a dialect is registered."""
    return _registry.is_supported(dialect)
