"""
Base adapter classes and configuration.

This module provides the core DialectAdapter class and related types.
"""

from .capabilities import CLOB_LENGTH, DialectCapabilities
from .config import AccessType, AdapterConfig, ColumnChangeRequest, ColumnSpec, LogicalType
from .core import UNKNOWN_TYPE, DialectAdapter
from .metadata import DBAPIQueryExecutor, QueryExecutor

__all__ = [
    "DialectAdapter",
    "DialectCapabilities",
    "CLOB_LENGTH",
    "UNKNOWN_TYPE",
    "AccessType",
    "AdapterConfig",
    "ColumnChangeRequest",
    "ColumnSpec",
    "LogicalType",
    "DBAPIQueryExecutor",
    "QueryExecutor",
]
