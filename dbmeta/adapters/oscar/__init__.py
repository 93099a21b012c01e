"""
ShenTong (Oscar) adapter implementation.

This module provides Oscar-specific functionality including:
- Type mapping with BIGSERIAL key columns
- Column type change emulation
- JDBC URL building with an optional port
"""

from .adapter import OscarAdapter

__all__ = ["OscarAdapter"]
