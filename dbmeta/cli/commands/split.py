"""
Script splitting command implementation.
"""

from pathlib import Path

import typer

from dbmeta.cli.context import CommandContext


def cmd_split(
    script_file: str,
    dialect: str | None = None,
    config_name: str = "default",
    project_root: str | None = None,
    verbose: bool = False,
) -> None:
    """Print each statement of a SQL script on its own, terminated by a semicolon."""
    ctx = CommandContext(
        dialect=dialect,
        config_name=config_name,
        project_root=project_root,
        verbose=verbose,
    )

    try:
        script = Path(script_file).read_text(encoding="utf-8")
        statements = ctx.adapter.split_script(script)
        if verbose:
            typer.echo(f"Found {len(statements)} statement(s) in {script_file}")
        for statement in statements:
            typer.echo(f"{statement};")
    except Exception as e:
        ctx.handle_error(e)
