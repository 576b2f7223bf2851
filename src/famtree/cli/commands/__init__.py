"""
CLI command modules for famtree.

Each command module defines a single Typer-compatible command function.
"""

from famtree.cli.commands.run import run_command

__all__ = [
    "run_command",
]
