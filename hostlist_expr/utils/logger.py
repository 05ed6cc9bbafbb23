"""
Logging utilities for hostlist_expr

The library only ever logs through ``logging.getLogger("hostlist_expr")``;
applications that want to see those records call :func:`setup_logging`.
"""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO


class FlushStreamHandler(logging.StreamHandler):
    def emit(self, record):
        super().emit(record)
        try:
            self.flush()
        except (OSError, ValueError):
            pass


class Colors:
    RED = '\033[91m'
    YELLOW = '\033[93m'
    GREEN = '\033[92m'
    GRAY = '\033[37m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


class HostlistConsoleFormatter(logging.Formatter):
    LEVEL_COLORS = {
        'DEBUG': Colors.GRAY,
        'INFO': Colors.GREEN,
        'WARNING': Colors.YELLOW,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.RED + Colors.BOLD,
    }

    def __init__(self, use_color: Optional[bool] = None):
        super().__init__()
        self.use_color = use_color

    def _colorize(self) -> bool:
        if self.use_color is not None:
            return self.use_color
        return sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S'
        )
        level = record.levelname
        message = record.getMessage()

        if self._colorize():
            color = self.LEVEL_COLORS.get(level, '')
            return (
                f"{Colors.GRAY}[{timestamp}]{Colors.RESET} "
                f"{color}[{level}]{Colors.RESET} {message}"
            )

        return f"[{timestamp}] [{level}] {message}"


def setup_logging(
        log_level: str = "info",
        log_to_console: bool = True,
        stream: Optional[TextIO] = None,
        use_color: Optional[bool] = None,
) -> logging.Logger:
    level_map = {
        "trace": logging.DEBUG,
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }
    level = level_map.get(log_level.lower(), logging.INFO)

    logger = logging.getLogger("hostlist_expr")
    logger.setLevel(level)
    logger.handlers.clear()

    if log_to_console:
        ch = FlushStreamHandler(stream or sys.stdout)
        ch.setLevel(level)
        ch.setFormatter(HostlistConsoleFormatter(use_color=use_color))
        logger.addHandler(ch)

    return logger
