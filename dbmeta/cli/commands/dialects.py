"""
Dialect listing and inspection commands.
"""

from typing import Literal

import typer

from dbmeta.adapters import get_adapter, get_dialect_capabilities, list_available_adapters
from dbmeta.cli.context import CommandContext
from dbmeta.cli.utils import render_output

# Type alias for output format
OutputFormat = Literal["json", "yaml"]


def cmd_list(verbose: bool = False) -> None:
    """Print the registered dialects, with driver class and default port when verbose."""
    for dialect in list_available_adapters():
        if verbose:
            adapter = get_adapter(dialect)
            port = get_dialect_capabilities(dialect).native_port
            typer.echo(f"{dialect}\t{adapter.get_native_driver_class()}\t{port}")
        else:
            typer.echo(dialect)


def cmd_describe(
    dialect: str | None = None,
    config_name: str = "default",
    project_root: str | None = None,
    attributes: list[str] | None = None,
    verbose: bool = False,
    format: OutputFormat = "json",
) -> None:
    """
    Print the capabilities and settings of a dialect.

    Args:
        dialect: Dialect identifier (defaults to the configured connection)
        config_name: Named connection in pyproject.toml
        project_root: Directory holding pyproject.toml
        attributes: Adapter attributes as KEY=VALUE strings
        verbose: Enable verbose output
        format: Output format ("json" or "yaml")
    """
    ctx = CommandContext(
        dialect=dialect,
        config_name=config_name,
        project_root=project_root,
        attributes=attributes,
        verbose=verbose,
    )

    try:
        typer.echo(render_output(ctx.adapter.get_database_info(), format))
    except Exception as e:
        ctx.handle_error(e)


def cmd_reserved(
    words: list[str],
    dialect: str | None = None,
    config_name: str = "default",
    project_root: str | None = None,
    verbose: bool = False,
) -> None:
    """Report whether each word is reserved in the dialect."""
    ctx = CommandContext(
        dialect=dialect,
        config_name=config_name,
        project_root=project_root,
        verbose=verbose,
    )

    try:
        adapter = ctx.adapter
        for word in words:
            status = "reserved" if adapter.is_reserved_word(word) else "not reserved"
            typer.echo(f"{word}: {status}")
    except Exception as e:
        ctx.handle_error(e)
