"""
Connection URL command implementation.
"""

import typer

from dbmeta.cli.context import CommandContext


def cmd_url(
    host: str | None = None,
    port: str | None = None,
    database: str | None = None,
    access_type: str | None = None,
    dialect: str | None = None,
    config_name: str = "default",
    project_root: str | None = None,
    verbose: bool = False,
) -> None:
    """Print the driver class and connection URL; options override the configuration."""
    ctx = CommandContext(
        dialect=dialect,
        config_name=config_name,
        project_root=project_root,
        verbose=verbose,
    )

    try:
        adapter = ctx.adapter
        config = adapter.config
        access = access_type if access_type is not None else config.access_type

        url = adapter.build_url(
            access,
            host if host is not None else config.host,
            port if port is not None else config.port,
            database if database is not None else config.database,
        )
        typer.echo(f"Driver: {adapter.driver_class(access)}")
        typer.echo(f"URL: {url}")
    except Exception as e:
        ctx.handle_error(e)
