"""
dbmeta CLI Main Module

Command-line interface for inspecting the DM and Oscar dialect adapters.
"""

from typing import Any, Literal

import typer

from dbmeta.adapters import is_adapter_supported, list_available_adapters
from dbmeta.adapters.base import LogicalType
from dbmeta.cli.commands import (
    cmd_alter,
    cmd_describe,
    cmd_field,
    cmd_list,
    cmd_reserved,
    cmd_split,
    cmd_url,
)

# Type aliases for better type safety and IDE support
OutputFormat = Literal["json", "yaml"]


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_format(value: str) -> OutputFormat:
    """Validate format option (json or yaml)."""
    if value not in ["json", "yaml"]:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid format '{value}'. Must be 'json' or 'yaml'."
        )
    return value  # type: ignore[return-value]


def validate_dialect(value: str | None) -> str | None:
    """Validate dialect option; None falls back to the configured connection."""
    if value is None:
        return None
    dialect = value.lower()
    if not is_adapter_supported(dialect):
        available = ", ".join(sorted(list_available_adapters()))
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Unsupported dialect '{dialect}'. "
            f"Supported: {available}"
        )
    return dialect


# Create Typer app with alphabetical command ordering
app = typer.Typer(
    name="dbmeta",
    help="dbmeta - SQL dialect adapters for Dameng (DM) and ShenTong (Oscar)",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
DIALECT_OPTION = typer.Option(
    None,
    "-d",
    "--dialect",
    help="Dialect (dm, oscar). Defaults to the connection in pyproject.toml",
    callback=validate_dialect,
)
CONFIG_OPTION = typer.Option(
    "default", "-c", "--config", help="Named connection in [tool.dbmeta.connections]"
)
PROJECT_ROOT_OPTION = typer.Option(
    None, "--project-root", help="Directory containing pyproject.toml (default: current directory)"
)
ATTRIBUTE_OPTION = typer.Option(
    None, "-a", "--attribute", help="Adapter attribute KEY=VALUE. Can be used multiple times."
)
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
TYPE_OPTION = typer.Option(LogicalType.STRING, "-t", "--type", help="Logical column type")
LENGTH_OPTION = typer.Option(-1, "-l", "--length", help="Column length (-1 when unknown)")
PRECISION_OPTION = typer.Option(-1, "-p", "--precision", help="Column precision (-1 when none)")
QUOTED_OPTION = typer.Option(False, "--quoted", help="Wrap the column name in double quotes")
TECHNICAL_KEY_OPTION = typer.Option(None, "--technical-key", help="Technical key column name")
PRIMARY_KEY_OPTION = typer.Option(None, "--primary-key", help="Primary key column name")
AUTOINC_OPTION = typer.Option(False, "--autoinc", help="Use auto increment for the key column")


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command(name="list")
def list_dialects(
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the available dialects."""
    cmd_list(verbose=verbose)


@app.command()
def describe(
    dialect: str | None = DIALECT_OPTION,
    config: str = CONFIG_OPTION,
    project_root: str | None = PROJECT_ROOT_OPTION,
    attribute: list[str] | None = ATTRIBUTE_OPTION,
    verbose: bool = VERBOSE_OPTION,
    format: OutputFormat = typer.Option(
        "json", "-f", "--format", help="Output format: json or yaml", callback=validate_format
    ),
) -> None:
    """Show the capabilities of a dialect."""
    cmd_describe(
        dialect=dialect,
        config_name=config,
        project_root=project_root,
        attributes=attribute,
        verbose=verbose,
        format=format,
    )


@app.command()
def field(
    ctx: typer.Context,
    name: str | None = typer.Argument(None, help="Column name"),
    dialect: str | None = DIALECT_OPTION,
    logical_type: LogicalType = TYPE_OPTION,
    length: int = LENGTH_OPTION,
    precision: int = PRECISION_OPTION,
    quoted: bool = QUOTED_OPTION,
    technical_key: str | None = TECHNICAL_KEY_OPTION,
    primary_key: str | None = PRIMARY_KEY_OPTION,
    autoinc: bool = AUTOINC_OPTION,
    type_only: bool = typer.Option(False, "--type-only", help="Print the type without the name"),
    config: str = CONFIG_OPTION,
    project_root: str | None = PROJECT_ROOT_OPTION,
    attribute: list[str] | None = ATTRIBUTE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the field definition of a column."""
    _check_required_argument(ctx, "name", name)
    cmd_field(
        name=name,
        logical_type=logical_type,
        length=length,
        precision=precision,
        quoted=quoted,
        technical_key=technical_key,
        primary_key=primary_key,
        use_autoinc=autoinc,
        add_fieldname=not type_only,
        dialect=dialect,
        config_name=config,
        project_root=project_root,
        attributes=attribute,
        verbose=verbose,
    )


@app.command()
def alter(
    ctx: typer.Context,
    action: str | None = typer.Argument(None, help="Column change: add, drop or modify"),
    table: str | None = typer.Argument(None, help="Table to alter"),
    name: str | None = typer.Argument(None, help="Column name"),
    dialect: str | None = DIALECT_OPTION,
    logical_type: LogicalType = TYPE_OPTION,
    length: int = LENGTH_OPTION,
    precision: int = PRECISION_OPTION,
    quoted: bool = QUOTED_OPTION,
    technical_key: str | None = TECHNICAL_KEY_OPTION,
    primary_key: str | None = PRIMARY_KEY_OPTION,
    autoinc: bool = AUTOINC_OPTION,
    semicolon: bool = typer.Option(False, "--semicolon", help="Terminate the output with ';'"),
    config: str = CONFIG_OPTION,
    project_root: str | None = PROJECT_ROOT_OPTION,
    attribute: list[str] | None = ATTRIBUTE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate ALTER TABLE statements for a column."""
    _check_required_argument(ctx, "action", action)
    _check_required_argument(ctx, "table", table)
    _check_required_argument(ctx, "name", name)
    cmd_alter(
        action=action,
        table_name=table,
        name=name,
        logical_type=logical_type,
        length=length,
        precision=precision,
        quoted=quoted,
        technical_key=technical_key,
        primary_key=primary_key,
        use_autoinc=autoinc,
        semicolon=semicolon,
        dialect=dialect,
        config_name=config,
        project_root=project_root,
        attributes=attribute,
        verbose=verbose,
    )


@app.command()
def url(
    dialect: str | None = DIALECT_OPTION,
    host: str | None = typer.Option(None, "-H", "--host", help="Server host (default: localhost)"),
    port: str | None = typer.Option(None, "-P", "--port", help="Server port (default: dialect port)"),
    database: str | None = typer.Option(None, "-D", "--database", help="Database name"),
    access_type: str | None = typer.Option(
        None, "--access-type", help="Access type: native or odbc (default: native)"
    ),
    config: str = CONFIG_OPTION,
    project_root: str | None = PROJECT_ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the JDBC driver class and connection URL."""
    cmd_url(
        host=host,
        port=port,
        database=database,
        access_type=access_type,
        dialect=dialect,
        config_name=config,
        project_root=project_root,
        verbose=verbose,
    )


@app.command()
def split(
    ctx: typer.Context,
    script_file: str | None = typer.Argument(None, help="Path to the SQL script"),
    dialect: str | None = DIALECT_OPTION,
    config: str = CONFIG_OPTION,
    project_root: str | None = PROJECT_ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Split a SQL script into statements."""
    _check_required_argument(ctx, "script_file", script_file)
    cmd_split(
        script_file=script_file,
        dialect=dialect,
        config_name=config,
        project_root=project_root,
        verbose=verbose,
    )


@app.command()
def reserved(
    ctx: typer.Context,
    words: list[str] | None = typer.Argument(None, help="Words to check"),
    dialect: str | None = DIALECT_OPTION,
    config: str = CONFIG_OPTION,
    project_root: str | None = PROJECT_ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check whether words are reserved in a dialect."""
    _check_required_argument(ctx, "words", words or None)
    cmd_reserved(
        words=words,
        dialect=dialect,
        config_name=config,
        project_root=project_root,
        verbose=verbose,
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
