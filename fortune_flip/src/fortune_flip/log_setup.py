import logging
import os
import sys
from typing import Dict, Optional


class ColoredFormatter(logging.Formatter):

    COLORS: Dict[str, str] = {
        'DEBUG': '\033[95m',
        'INFO': '\033[94m',
        'WARNING': '\033[93m',
        'ERROR': '\033[91m',
        'CRITICAL': '\033[95m'
    }

    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, stream=None):
        if fmt is None:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        super().__init__(fmt, datefmt)
        self.stream = stream or sys.stderr

    def format(self, record):
        log_message = super().format(record)
        if not self._supports_color():
            return log_message
        color = self.COLORS.get(record.levelname, '')
        if color:
            return f"{color}{log_message}{self.RESET}"
        return log_message

    def _supports_color(self):
        if not hasattr(self.stream, 'isatty') or not self.stream.isatty():
            return False
        term = os.environ.get('TERM', '')
        return term != 'dumb' and term != ''


def setup_colored_logging(level: Optional[str] = None):
    """Route root logging to stderr with colours; level from FORTUNE_FLIP_LOG_LEVEL."""
    level = level or os.environ.get("FORTUNE_FLIP_LOG_LEVEL", "INFO")
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr keeps log lines out of the menu output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(stream=sys.stderr))
    root_logger.addHandler(console_handler)

    return root_logger
