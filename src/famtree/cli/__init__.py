"""
CLI package for famtree.

Provides the Typer application entrypoint, the menu loop and its prompts.
"""

from famtree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
