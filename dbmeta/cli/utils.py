"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import json
import logging
from typing import Any

import yaml

from dbmeta.adapters.base import ColumnSpec, LogicalType


def parse_attributes(pairs: list[str] | None) -> dict[str, str]:
    """
    Parse KEY=VALUE pairs into an attribute dictionary.

    Args:
        pairs: Strings in KEY=VALUE form (None for empty)

    Returns:
        Dictionary of attribute values

    Raises:
        ValueError: If a pair has no '=' or an empty key
    """
    attributes = {}
    for pair in pairs or []:
        key, separator, value = pair.partition("=")
        if not separator or not key.strip():
            raise ValueError(f"Invalid attribute '{pair}' (expected KEY=VALUE)")
        attributes[key.strip()] = value.strip()
    return attributes


def build_column(
    name: str,
    logical_type: LogicalType,
    length: int = -1,
    precision: int = -1,
    quoted: bool = False,
) -> ColumnSpec:
    """Build a column from command line options."""
    return ColumnSpec(
        name=name, logical_type=logical_type, length=length, precision=precision, quoted=quoted
    )


def render_output(data: dict[str, Any], format: str = "json") -> str:
    """
    Render a dictionary as JSON or YAML text.

    Args:
        data: Data to render
        format: "json" or "yaml"

    Returns:
        Rendered text without a trailing newline
    """
    if format == "yaml":
        return yaml.dump(
            data, default_flow_style=False, sort_keys=False, allow_unicode=True
        ).rstrip("\n")
    return json.dumps(data, indent=2)


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")
