"""
Logging setup for the plotter window.

The plotter modules sit at the top level (and ``function_plotter`` runs as
``__main__`` when started as a script), so output is routed through the root
logger. Only the handlers installed here are ever replaced; anything another
library attached to the root logger is left alone.
"""
import logging
import sys
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Handlers owned by setup_logging, swapped out on every call
_installed_handlers: List[logging.Handler] = []


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Send the plotter's log records to stdout and, optionally, a file.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path, truncated and written alongside stdout.
    """
    root = logging.getLogger()

    while _installed_handlers:
        old = _installed_handlers.pop()
        root.removeHandler(old)
        old.close()

    root.setLevel(level)
    for handler in _build_handlers(level, log_file):
        root.addHandler(handler)
        _installed_handlers.append(handler)

    logging.getLogger(__name__).info(f"Logging initialized at {logging.getLevelName(level)}.")
