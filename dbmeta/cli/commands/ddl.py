"""
Column DDL commands.
"""

import typer

from dbmeta.adapters.base import ColumnChangeRequest, LogicalType
from dbmeta.cli.context import CommandContext
from dbmeta.cli.utils import build_column


def cmd_field(
    name: str,
    logical_type: LogicalType = LogicalType.STRING,
    length: int = -1,
    precision: int = -1,
    quoted: bool = False,
    technical_key: str | None = None,
    primary_key: str | None = None,
    use_autoinc: bool = False,
    add_fieldname: bool = True,
    dialect: str | None = None,
    config_name: str = "default",
    project_root: str | None = None,
    attributes: list[str] | None = None,
    verbose: bool = False,
) -> None:
    """Print the field definition of a column."""
    ctx = CommandContext(
        dialect=dialect,
        config_name=config_name,
        project_root=project_root,
        attributes=attributes,
        verbose=verbose,
    )

    try:
        column = build_column(name, logical_type, length, precision, quoted)
        typer.echo(
            ctx.adapter.field_definition(
                column,
                technical_key=technical_key,
                primary_key=primary_key,
                use_autoinc=use_autoinc,
                add_fieldname=add_fieldname,
            )
        )
    except Exception as e:
        ctx.handle_error(e)


def cmd_alter(
    action: str,
    table_name: str,
    name: str,
    logical_type: LogicalType = LogicalType.STRING,
    length: int = -1,
    precision: int = -1,
    quoted: bool = False,
    technical_key: str | None = None,
    primary_key: str | None = None,
    use_autoinc: bool = False,
    semicolon: bool = False,
    dialect: str | None = None,
    config_name: str = "default",
    project_root: str | None = None,
    attributes: list[str] | None = None,
    verbose: bool = False,
) -> None:
    """
    Print the statement(s) adding, dropping or modifying a column.

    Args:
        action: One of "add", "drop" or "modify"
        table_name: Table to alter
        name: Column name
        logical_type: Logical type of the column
        length: Column length (-1 when unknown)
        precision: Column precision (-1 when none)
        quoted: Wrap the column name in double quotes
        technical_key: Name of the table's technical key column
        primary_key: Name of the table's primary key column
        use_autoinc: Whether the key column should use auto increment
        semicolon: Terminate the output with a semicolon
        dialect: Dialect identifier (defaults to the configured connection)
        config_name: Named connection in pyproject.toml
        project_root: Directory holding pyproject.toml
        attributes: Adapter attributes as KEY=VALUE strings
        verbose: Enable verbose output
    """
    ctx = CommandContext(
        dialect=dialect,
        config_name=config_name,
        project_root=project_root,
        attributes=attributes,
        verbose=verbose,
    )

    try:
        request = ColumnChangeRequest(
            table_name=table_name,
            column=build_column(name, logical_type, length, precision, quoted),
            technical_key=technical_key,
            primary_key=primary_key,
            use_autoinc=use_autoinc,
            semicolon=semicolon,
        )
        typer.echo(ctx.adapter.render_column_change(request, action.lower()))
    except Exception as e:
        ctx.handle_error(e)
