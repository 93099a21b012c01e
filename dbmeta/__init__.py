"""
dbmeta Module

SQL dialect adapters for the Dameng (DM) and ShenTong (Oscar) databases:
type mapping, column DDL, sequence SQL, connection URLs and index probing.
"""

from .adapters import (
    AccessType,
    AdapterConfig,
    ColumnChangeRequest,
    ColumnSpec,
    DBAPIQueryExecutor,
    DialectAdapter,
    DMAdapter,
    LogicalType,
    OscarAdapter,
    get_adapter,
    list_available_adapters,
)

# Import CLI
from .cli.main import main as cli_main
from .config import load_dialect_config
from .exceptions import (
    DialectError,
    IntrospectionError,
    InvalidInputError,
    MissingDatabaseNameError,
    UnsupportedAccessModeError,
)
from .variables import Variables

__all__ = [
    "DialectAdapter",
    "DMAdapter",
    "OscarAdapter",
    "AccessType",
    "AdapterConfig",
    "ColumnSpec",
    "ColumnChangeRequest",
    "LogicalType",
    "DBAPIQueryExecutor",
    "Variables",
    "get_adapter",
    "list_available_adapters",
    "load_dialect_config",
    "DialectError",
    "InvalidInputError",
    "MissingDatabaseNameError",
    "UnsupportedAccessModeError",
    "IntrospectionError",
    "cli_main",
]
