"""
Dialect adapters for the dbmeta package.

This package provides pluggable dialect adapters that handle:
- Mapping abstract columns to dialect types
- Column, sequence and lock DDL generation
- JDBC connection URL building
- Reserved words and index introspection

Each adapter is organized in its own subpackage for better maintainability.
"""

from .base import (
    AccessType,
    AdapterConfig,
    ColumnChangeRequest,
    ColumnSpec,
    DBAPIQueryExecutor,
    DialectAdapter,
    DialectCapabilities,
    LogicalType,
    QueryExecutor,
)

# Import adapters to register them
from .dm import DMAdapter
from .oscar import OscarAdapter
from .registry import (
    AdapterRegistry,
    get_adapter,
    get_dialect_capabilities,
    is_adapter_supported,
    list_available_adapters,
    register_adapter,
)

__all__ = [
    # Base classes and configuration
    "DialectAdapter",
    "DialectCapabilities",
    "AdapterConfig",
    "AccessType",
    "ColumnSpec",
    "ColumnChangeRequest",
    "LogicalType",
    # Collaborators
    "QueryExecutor",
    "DBAPIQueryExecutor",
    # Registry and factory functions
    "AdapterRegistry",
    "get_adapter",
    "get_dialect_capabilities",
    "register_adapter",
    "list_available_adapters",
    "is_adapter_supported",
    # Available adapters
    "DMAdapter",
    "OscarAdapter",
]
