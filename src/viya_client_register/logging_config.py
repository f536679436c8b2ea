"""Python logging configuration for the registration tool.

Log records go to stderr so the instructions printed on stdout stay clean.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Format the log record with colors if supported."""
        msg = super().format(record)
        color = self.COLORS.get(record.levelname, '')
        if color:
            msg = f"{color}{msg}{self.RESET}"
        return msg


def setup_logging(
    log_level: str = "INFO",
    use_colors: bool = True,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """Configure the package logger with a console handler.

    Args:
        log_level: Logging level name
        use_colors: Whether to use colored output for TTY
        log_format: Custom log format (if None, uses default)

    Returns:
        Configured package logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("viya_client_register")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if use_colors and sys.stderr.isatty():
        handler.setFormatter(ColoredFormatter(log_format or DEFAULT_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(log_format or DEFAULT_LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
