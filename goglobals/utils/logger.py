"""Logging setup."""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """Configure the root logger.

    Log output goes to stderr so that reports written to stdout stay
    machine readable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file
        format_string: Optional custom format string

    Returns:
        The root logger
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(format_string)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # drop handlers from earlier calls
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_path,
            encoding="utf-8"
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


class ProgressLogger:
    """Helper for periodic progress messages.

    update() may be called from several worker threads.
    """

    def __init__(
        self,
        total: int,
        logger: Optional[logging.Logger] = None,
        log_interval: int = 50
    ):
        """Initialize the progress logger.

        Args:
            total: Total number of items
            logger: Logger to write to
            log_interval: Items between progress messages
        """
        self.total = total
        self.current = 0
        self.logger = logger or logging.getLogger(__name__)
        self.log_interval = log_interval
        self._lock = threading.Lock()

    def update(self, message: Optional[str] = None) -> None:
        """Advance progress by one item.

        Args:
            message: Optional message to include
        """
        with self._lock:
            self.current += 1
            current = self.current

        if current % self.log_interval == 0 or current == self.total:
            progress = current / self.total * 100 if self.total else 100.0
            msg = f"Progress: {current}/{self.total} ({progress:.1f}%)"
            if message:
                msg += f" - {message}"
            self.logger.info(msg)

    def complete(self, message: str = "Complete") -> None:
        """Log completion.

        Args:
            message: Completion message
        """
        self.logger.info(f"{message}: {self.total} items processed")
