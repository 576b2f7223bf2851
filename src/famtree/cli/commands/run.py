from __future__ import annotations

import typer
from rich.console import Console

from famtree.cli.menu import Menu
from famtree.cli.prompts import ConsolePrompter
from famtree.config import get_config
from famtree.logging import enable_debug, get_logger
from famtree.registry import MemberRegistry

console = Console()
log = get_logger(__name__)


def run_command(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
):
    """
    Start the interactive family tree menu.
    """
    cfg = get_config()
    cfg.debug = cfg.debug or debug
    if cfg.debug:
        enable_debug()

    settings = cfg.display_settings()
    registry = MemberRegistry(max_name_length=settings.max_name_length)
    menu = Menu(registry, ConsolePrompter(console), console=console, settings=settings)

    log.info("Session started")
    try:
        menu.run()
    except Exception as exc:
        log.exception(f"Unhandled exception in menu: {exc}")
        raise
    log.info(f"Session ended with {len(registry)} member(s)")
