"""
Logging setup for the hexline package.

All loggers live under the 'hexline' namespace and write to stderr, so
they never mix with dump lines on stdout.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = 'hexline'

# NONE is not a logging level; it switches the hexline loggers off
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'NONE')

LEVEL_COLORS = {
    logging.DEBUG: '\033[36m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[35m',
}
RESET = '\033[0m'


class LoggingManager:
    """Owns the single stderr handler attached to the hexline logger."""

    class ColoredFormatter(logging.Formatter):
        """Formatter that colors the level name by severity."""

        def __init__(self, fmt=None, use_color=True):
            super().__init__(fmt)
            self.use_color = use_color

        def format(self, record):
            color = LEVEL_COLORS.get(record.levelno) if self.use_color else None
            if color is None:
                return super().format(record)
            plain = record.levelname
            record.levelname = f"{color}{plain}{RESET}"
            try:
                return super().format(record)
            finally:
                # Other handlers see the same record
                record.levelname = plain

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup(cls, level: str = 'WARNING', module_levels: Optional[dict] = None, use_color: bool = True):
        """
        Configure the hexline logger, replacing any earlier setup.

        Args:
            level: One of LOG_LEVELS
            module_levels: Per-module overrides, e.g. {'hex_reader': 'DEBUG'}
            use_color: Color level names with ANSI codes
        """
        root_logger = logging.getLogger(ROOT_LOGGER)
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
            cls._handler = None

        if level.upper() == 'NONE':
            root_logger.setLevel(logging.CRITICAL + 1)
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(cls.ColoredFormatter('%(levelname)s [%(name)s] %(message)s', use_color))
        root_logger.addHandler(handler)
        root_logger.setLevel(_level_number(level))
        cls._handler = handler

        for module, mod_level in (module_levels or {}).items():
            cls.get_logger(module).setLevel(_level_number(mod_level))

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        return logging.getLogger(f'{ROOT_LOGGER}.{name}')


def _level_number(name: str) -> int:
    return getattr(logging, name.upper(), logging.WARNING)


def setup_logging(level: str = 'WARNING', module_levels: Optional[dict] = None, use_color: bool = True):
    LoggingManager.setup(level, module_levels, use_color)


def get_logger(name: str) -> logging.Logger:
    """Logger for one hexline module, e.g. get_logger('sink')."""
    return LoggingManager.get_logger(name)
