"""
Dameng (DM) adapter implementation.

This module provides DM-specific functionality including:
- Oracle-style type mapping (VARCHAR2, CLOB, NUMBER)
- Column type change emulation
- Exception-guarded DROP TABLE
- JDBC URL building
"""

from .adapter import DMAdapter

__all__ = ["DMAdapter"]
