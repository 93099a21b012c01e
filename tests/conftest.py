"""
Pytest configuration and shared fixtures for dbmeta tests.
"""

import pytest
from pathlib import Path

import duckdb

from dbmeta.adapters.base import ColumnSpec, DBAPIQueryExecutor, LogicalType
from dbmeta.adapters.dm.adapter import DMAdapter
from dbmeta.adapters.oscar.adapter import OscarAdapter
from dbmeta.config import DialectConfigManager


@pytest.fixture
def dm_adapter():
    """Create DM adapter instance."""
    return DMAdapter({"type": "dm"})


@pytest.fixture
def oscar_adapter():
    """Create Oscar adapter instance."""
    return OscarAdapter({"type": "oscar"})


@pytest.fixture(params=["dm", "oscar"])
def any_adapter(request):
    """Both adapters, for behavior they share."""
    if request.param == "dm":
        return DMAdapter({"type": "dm"})
    return OscarAdapter({"type": "oscar"})


@pytest.fixture
def string_column():
    """A plain VARCHAR-sized string column."""
    return ColumnSpec(name="NAME", logical_type=LogicalType.STRING, length=100)


@pytest.fixture
def duckdb_connection():
    """In-memory DuckDB connection with an Oracle-style index catalog."""
    conn = duckdb.connect(":memory:")
    conn.execute(
        "CREATE TABLE USER_IND_COLUMNS ("
        "INDEX_NAME VARCHAR, TABLE_NAME VARCHAR, COLUMN_NAME VARCHAR, COLUMN_POSITION INTEGER)"
    )
    conn.execute(
        "INSERT INTO USER_IND_COLUMNS VALUES "
        "('IDX_ORDERS_1', 'ORDERS', 'CUSTOMER_ID', 1), "
        "('IDX_ORDERS_1', 'ORDERS', 'ORDER_DATE', 2), "
        "('PK_ORDERS', 'ORDERS', 'ID', 1), "
        "('PK_ITEMS', 'ITEMS', 'ID', 1)"
    )
    yield conn
    conn.close()


@pytest.fixture
def duckdb_executor(duckdb_connection):
    """QueryExecutor backed by the DuckDB connection."""
    return DBAPIQueryExecutor(duckdb_connection)


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Project directory with a pyproject.toml holding dialect connections."""
    (tmp_path / "pyproject.toml").write_text(
        "[tool.dbmeta.connections.default]\n"
        'type = "dm"\n'
        'host = "dm.example.com"\n'
        "port = 5236\n"
        'database = "SALES"\n'
        "\n"
        "[tool.dbmeta.connections.default.attributes]\n"
        "SUPPORTS_TIMESTAMP_DATA_TYPE = true\n"
        "\n"
        "[tool.dbmeta.connections.archive]\n"
        'type = "oscar"\n'
        'host = "oscar.example.com"\n'
        'database = "ARCHIVE"\n'
    )
    return tmp_path


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture(autouse=True)
def clean_dbmeta_env(monkeypatch):
    """Keep DBMETA_* variables of the calling shell out of the tests."""
    for env_var in DialectConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)
