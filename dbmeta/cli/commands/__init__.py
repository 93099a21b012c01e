"""
CLI command implementations.
"""

from dbmeta.cli.commands.ddl import cmd_alter, cmd_field
from dbmeta.cli.commands.dialects import cmd_describe, cmd_list, cmd_reserved
from dbmeta.cli.commands.split import cmd_split
from dbmeta.cli.commands.url import cmd_url

__all__ = ["cmd_list", "cmd_describe", "cmd_reserved", "cmd_field", "cmd_alter", "cmd_url", "cmd_split"]
