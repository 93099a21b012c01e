"""
Command context for shared setup across CLI commands.
"""

import typer
from dataclasses import asdict
from typing import Any

from dbmeta.adapters import DialectAdapter, get_adapter
from dbmeta.config import load_dialect_config

from .utils import parse_attributes, setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: logging, resolving the dialect adapter either from
    the command line or from the project configuration, and error reporting.
    """

    def __init__(
        self,
        dialect: str | None = None,
        config_name: str = "default",
        project_root: str | None = None,
        attributes: list[str] | None = None,
        verbose: bool = False,
    ):
        """
        Initialize command context from parameters.

        Args:
            dialect: Dialect identifier; when omitted the configured connection is used
            config_name: Named connection to load from pyproject.toml
            project_root: Directory holding pyproject.toml (defaults to current directory)
            attributes: Adapter attributes as KEY=VALUE strings
            verbose: Enable verbose output
        """
        self.dialect = dialect
        self.config_name = config_name
        self.project_root = project_root
        self.attribute_pairs = attributes

        # Set up logging
        self.verbose = verbose
        setup_logging(self.verbose)

        self._adapter: DialectAdapter | None = None

    @property
    def adapter(self) -> DialectAdapter:
        """Adapter for the selected dialect, created on first use."""
        if self._adapter is None:
            self._adapter = get_adapter(self._adapter_config())
        return self._adapter

    def _adapter_config(self) -> dict[str, Any]:
        if self.dialect:
            config: dict[str, Any] = {"type": self.dialect}
        else:
            config = asdict(load_dialect_config(self.config_name, self.project_root))

        # Command line attributes override configured ones
        attributes = dict(config.get("attributes") or {})
        attributes.update(parse_attributes(self.attribute_pairs))
        config["attributes"] = attributes
        return config

    def handle_error(self, error: Exception, show_traceback: bool = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        if show_traceback:
            import traceback
            traceback.print_exc()
        raise typer.Exit(1)
