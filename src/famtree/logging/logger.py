"""
Centralized logging configuration for famtree.

Every module asks ``get_logger(__name__)`` for its logger. The first call
configures the ``famtree`` base logger from the ``logging`` section of
``config/famtree.yml``:

* a master log file (``logs/famtree.log`` by default), optionally rotated
* a stderr console handler at ``console_level`` (WARNING by default) so log
  records stay out of the interactive menu
* one extra file per module, ``logs/<module>.log``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from famtree.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BASE_LOGGER_NAME = "famtree"


@dataclass
class _LogSettings:
    log_dir: Path
    master_file: str
    level: int
    console_level: int
    rotate: bool

    @classmethod
    def from_config(cls) -> "_LogSettings":
        cfg = get_config()
        section = cfg.logging

        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        level = _level_from(section.get("level", "INFO"), logging.INFO)
        console_level = _level_from(section.get("console_level", "WARNING"), logging.WARNING)
        if cfg.debug:
            level = console_level = logging.DEBUG

        return cls(
            log_dir=log_dir,
            master_file=section.get("file", "famtree.log"),
            level=level,
            console_level=console_level,
            rotate=bool(section.get("rotate", False)),
        )


# Loggers handed out so far, so --debug can lower all of them
_loggers: Dict[str, Logger] = {}
_settings: Optional[_LogSettings] = None


def _level_from(name: object, fallback: int) -> int:
    return getattr(logging, str(name).upper(), fallback)


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: _LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _base_logger() -> Logger:
    """Configure the shared ``famtree`` logger on first use."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    _settings = _LogSettings.from_config()
    base.setLevel(_settings.level)
    base.propagate = False
    base.addHandler(_file_handler(_settings, _settings.master_file))

    console = StreamHandler()
    console.setLevel(_settings.console_level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _loggers[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: str | None = None) -> Logger:
    """Return a module logger that also writes to ``logs/<module>.log``."""
    base = _base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name == base.name:
        return base

    logger = logging.getLogger(logger_name)
    logger.setLevel(_settings.level)
    if not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        handler = _file_handler(_settings, f"{logger_name.replace('.', '_')}.log")
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.propagate = True

    _loggers[logger_name] = logger
    return logger


def enable_debug() -> None:
    """Lower every famtree logger and handler to DEBUG.

    Module loggers exist from import time, before ``--debug`` is parsed.
    """
    _base_logger()
    _settings.level = _settings.console_level = logging.DEBUG

    for logger in _loggers.values():
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
