"""
Logging set-up driven by ``Settings``.

``setup_logging`` attaches the application's console handler, plus a
file handler when ``settings.log_file`` is set, to the root logger.
``settings.debug`` forces the ``DEBUG`` level; otherwise
``settings.log_level`` is used, falling back to ``INFO`` for unknown
names.  Handlers installed here carry a name so a second call (another
``create_app`` in the same process) does not duplicate them, while
handlers owned by someone else, such as a test runner, are left alone.
"""

import logging
from pathlib import Path
from typing import List, Set

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "user_management_api.console"
FILE_HANDLER_NAME = "user_management_api.file"


def resolve_level(config: Settings) -> int:
    if config.debug:
        return logging.DEBUG
    level = logging.getLevelName(config.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _missing_handlers(config: Settings, installed: Set[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if CONSOLE_HANDLER_NAME not in installed:
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER_NAME)
        handlers.append(console)
    if config.log_file and FILE_HANDLER_NAME not in installed:
        log_file = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        log_file.set_name(FILE_HANDLER_NAME)
        handlers.append(log_file)
    return handlers


def setup_logging(config: Settings) -> None:
    """Apply the logging part of ``config`` to the root logger."""
    root = logging.getLogger()
    root.setLevel(resolve_level(config))

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _missing_handlers(config, installed):
        handler.setFormatter(formatter)
        root.addHandler(handler)
