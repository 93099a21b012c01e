"""
Tests for dialect configuration loading.
"""

import pytest

from dbmeta.adapters import get_adapter
from dbmeta.adapters.base import AccessType
from dbmeta.config import DialectConfigManager, load_dialect_config


class TestDialectConfigManager:
    """Test loading configuration from pyproject.toml and the environment."""

    def test_named_default_connection(self, project_dir):
        """Test the default connection table."""
        config = load_dialect_config(project_root=str(project_dir))

        assert config.type == "dm"
        assert config.host == "dm.example.com"
        assert config.port == 5236
        assert config.database == "SALES"
        assert config.access_type == AccessType.NATIVE
        assert config.attributes == {"SUPPORTS_TIMESTAMP_DATA_TYPE": "Y"}

    def test_other_named_connection(self, project_dir):
        """Test selecting a connection by name."""
        config = load_dialect_config("archive", project_root=str(project_dir))
        assert config.type == "oscar"
        assert config.database == "ARCHIVE"

    def test_single_connection_table(self, tmp_path):
        """Test the [tool.dbmeta.connection] form."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.dbmeta.connection]\ntype = "oscar"\naccess_type = "ODBC"\ndatabase = "DSN1"\n'
        )
        config = load_dialect_config(project_root=str(tmp_path))
        assert config.type == "oscar"
        assert config.access_type == AccessType.ODBC

    def test_environment_overrides_file(self, project_dir, monkeypatch):
        """Test that DBMETA_* variables win over pyproject.toml."""
        monkeypatch.setenv("DBMETA_TYPE", "oscar")
        monkeypatch.setenv("DBMETA_PORT", "2003")
        monkeypatch.setenv("DBMETA_HOST", "os1")

        config = load_dialect_config(project_root=str(project_dir))
        assert config.type == "oscar"
        assert config.port == 2003
        assert config.host == "os1"
        assert config.database == "SALES"

    def test_environment_only(self, tmp_path, monkeypatch):
        """Test configuration without any pyproject.toml."""
        monkeypatch.setenv("DBMETA_TYPE", "dm")
        monkeypatch.setenv("DBMETA_DATABASE", "db1")

        config = DialectConfigManager(str(tmp_path)).load_config()
        assert get_adapter(config).connection_url() == "jdbc:dm://localhost:12345/db1"

    def test_no_configuration(self, tmp_path):
        """Test the error when nothing is configured."""
        with pytest.raises(ValueError, match="No dialect configuration found"):
            load_dialect_config(project_root=str(tmp_path))

    def test_missing_type(self, tmp_path):
        """Test the error when the type is missing."""
        (tmp_path / "pyproject.toml").write_text('[tool.dbmeta.connection]\nhost = "h"\n')
        with pytest.raises(ValueError, match="Database type is required"):
            load_dialect_config(project_root=str(tmp_path))

    def test_invalid_toml_is_ignored(self, tmp_path, monkeypatch, caplog):
        """Test that an unreadable pyproject.toml falls back to the environment."""
        (tmp_path / "pyproject.toml").write_text("[tool.dbmeta\n")
        monkeypatch.setenv("DBMETA_TYPE", "oscar")

        config = load_dialect_config(project_root=str(tmp_path))
        assert config.type == "oscar"
        assert "Could not read pyproject.toml" in caplog.text

    def test_unknown_access_type(self, tmp_path):
        """Test access type validation."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.dbmeta.connection]\ntype = "dm"\naccess_type = "telnet"\n'
        )
        with pytest.raises(ValueError, match="Unknown access type"):
            load_dialect_config(project_root=str(tmp_path))
