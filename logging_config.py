"""Logging configuration for tablesort.

Provides colored console output and optional file logging.
Uses % formatting (PEP 391) for security.
"""

import logging
from pathlib import Path

import config

# Handlers installed by setup_logging, replaced on the next call
_installed_handlers: list[logging.Handler] = []


class ColoredFormatter(logging.Formatter):
    """Add ANSI colors to log levels."""

    COLORS = config.LOG_COLORS
    RESET = config.LOG_COLOR_RESET

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        The record's levelname is restored afterwards so that other
        handlers (e.g. the log file) see the plain name.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with color codes.
        """
        levelname = record.levelname
        if levelname not in self.COLORS:
            return super().format(record)

        record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    use_colors: bool = True,
) -> None:
    """Configure logging.

    Calling again replaces the handlers from the previous call.

    Args:
        verbose: Enable DEBUG level (default: WARNING+ only)
        log_file: Optional file output path
        use_colors: Color level names on the console
    """
    root_logger = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING
    root_logger.setLevel(level)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Console handler (stderr keeps stdout free for JSON output)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    if use_colors:
        console_handler.setFormatter(ColoredFormatter("%(levelname)s: %(message)s"))
    else:
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module.
    """
    return logging.getLogger(name)
