"""
Logging utilities for the installer
"""

import logging
import sys

LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColorFormatter(logging.Formatter):
    """Prefix warnings and errors with a coloured [LEVEL] tag like the bash scripts"""

    COLORS = {
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[41m',  # Red background
    }

    def __init__(self, use_color=False):
        super().__init__('%(tag)s %(message)s')
        self.use_color = use_color

    def format(self, record):
        tag = f"[{record.levelname}]"
        if self.use_color and record.levelname in self.COLORS:
            tag = f"{self.COLORS[record.levelname]}{tag}\033[0m"
        record.tag = tag
        return super().format(record)


class MaxLevelFilter(logging.Filter):
    """Pass only records below a given level"""

    def __init__(self, max_level):
        super().__init__()
        self.max_level = max_level

    def filter(self, record):
        return record.levelno < self.max_level


def setup_logging(debug_mode=False, log_file=None):
    """Setup logging configuration

    Informational records go to stdout as timestamped lines, warnings and
    errors go to stderr tagged with their level. When ``log_file`` is given
    every record is also appended there.
    """
    level = logging.DEBUG if debug_mode else logging.INFO

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(
        logging.Formatter('[%(asctime)s] %(message)s', datefmt=LOG_DATE_FORMAT)
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(ColorFormatter(use_color=sys.stderr.isatty()))

    handlers = [stdout_handler, stderr_handler]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s', datefmt=LOG_DATE_FORMAT)
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    return logging.getLogger('appinstall')
