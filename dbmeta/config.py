"""
Dialect configuration management.

This module handles loading adapter configurations from pyproject.toml
and environment variables with proper precedence and validation.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from dbmeta.adapters.base import AccessType, AdapterConfig
from dbmeta.adapters.base.config import normalize_attributes


class DialectConfigManager:
    """Manages dialect adapter configurations from multiple sources."""

    ENV_MAPPINGS = {
        "DBMETA_TYPE": "type",
        "DBMETA_ACCESS_TYPE": "access_type",
        "DBMETA_HOST": "host",
        "DBMETA_PORT": "port",
        "DBMETA_DATABASE": "database",
    }

    def __init__(self, project_root: str | None = None) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self, config_name: str = "default") -> AdapterConfig:
        """
        Load adapter configuration from pyproject.toml and environment variables.

        Args:
            config_name: Name of the configuration to load (default: "default")

        Returns:
            AdapterConfig object with merged configuration

        Raises:
            ValueError: If configuration is invalid or missing
        """
        toml_config = self._load_toml_config(config_name)
        env_config = self._load_env_config()

        # Environment variables override the TOML file
        merged_config = self._merge_configs(toml_config, env_config)

        return self._create_adapter_config(merged_config)

    def _load_toml_config(self, config_name: str) -> dict[str, Any]:
        """Load configuration from the [tool.dbmeta] table of pyproject.toml."""
        toml_file = self.project_root / "pyproject.toml"
        if not toml_file.exists():
            self.logger.debug("No pyproject.toml found")
            return {}

        try:
            with open(toml_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            self.logger.warning(f"Could not read pyproject.toml: {e}")
            return {}

        dbmeta_config = data.get("tool", {}).get("dbmeta", {})

        # Single connection in tool.dbmeta.connection
        if "connection" in dbmeta_config:
            return dict(dbmeta_config["connection"])

        # Named connections in tool.dbmeta.connections
        connections = dbmeta_config.get("connections", {})
        if isinstance(connections, dict) and config_name in connections:
            return dict(connections[config_name])

        self.logger.debug(f"No dialect configuration '{config_name}' found in pyproject.toml")
        return {}

    def _load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}
        for env_var, config_key in self.ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if value is not None:
                if config_key == "port" and value.isdigit():
                    env_config[config_key] = int(value)
                else:
                    env_config[config_key] = value
        return env_config

    def _merge_configs(
        self, toml_config: dict[str, Any], env_config: dict[str, Any]
    ) -> dict[str, Any]:
        """Merge TOML and environment configurations."""
        merged = toml_config.copy()
        merged.update(env_config)
        return merged

    def _create_adapter_config(self, config_dict: dict[str, Any]) -> AdapterConfig:
        """Create AdapterConfig from dictionary."""
        if not config_dict:
            raise ValueError("No dialect configuration found")

        db_type = config_dict.get("type")
        if not db_type:
            raise ValueError("Database type is required")

        attributes = config_dict.get("attributes") or {}
        if not isinstance(attributes, dict):
            raise ValueError("Attributes must be a table of key/value pairs")

        return AdapterConfig(
            type=db_type,
            access_type=AccessType.parse(config_dict.get("access_type")),
            host=config_dict.get("host"),
            port=config_dict.get("port"),
            database=config_dict.get("database"),
            attributes=normalize_attributes(attributes),
            extra=config_dict.get("extra"),
        )


def load_dialect_config(
    config_name: str = "default", project_root: str | None = None
) -> AdapterConfig:
    """
    Convenience function to load dialect configuration.

    Args:
        config_name: Name of the configuration to load
        project_root: Project root directory (defaults to current directory)

    Returns:
        AdapterConfig object
    """
    manager = DialectConfigManager(project_root)
    return manager.load_config(config_name)
