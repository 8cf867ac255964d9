"""Structured logging infrastructure with verbosity levels and progress tracking."""

import logging
import logging.handlers
import os
import time
from typing import Any, Dict, Optional

import colorlog

LOGGER_NAME = 'wordpress_to_zola'

# Environment variable read when no explicit level is configured
LOG_LEVEL_ENV_VAR = 'WORDPRESS_TO_ZOLA_LOG'


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_file: Optional[str] = None,
    level: Optional[str] = None
) -> logging.Logger:
    """
    Set up structured logging for the converter.

    The level is taken from ``level`` if given (the CLI maps ``-v``/``-vv``
    onto it), then from the WORDPRESS_TO_ZOLA_LOG environment variable, and
    defaults to WARNING.

    Args:
        log_file: Optional path to log file
        level: Optional explicit log level string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level or the environment variable is not a log level
    """
    log_level = _resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(colorlog.ColoredFormatter(
        fmt='%(log_color)s' + LOG_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    ))
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
        except OSError as e:
            logger.warning(f"Failed to set up file logging: {e}")
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)
            logger.info(f"Logging to file: {log_file}")

    logger.debug(f"Log level: {logging.getLevelName(log_level)}")
    return logger


def _resolve_level(level: Optional[str]) -> int:
    """Pick the effective log level."""
    source = 'log level'
    if not level:
        level = os.environ.get(LOG_LEVEL_ENV_VAR)
        source = LOG_LEVEL_ENV_VAR
    if not level:
        return logging.WARNING

    allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    level_upper = level.upper()
    if level_upper not in allowed_levels:
        raise ValueError(
            f"Invalid {source} '{level}'. Must be one of: {sorted(allowed_levels)}"
        )
    return getattr(logging, level_upper)


class ProgressTracker:
    """Context manager for tracking progress across operations."""

    def __init__(self, total_items: int, item_type: str = "items"):
        """
        Initialize progress tracker.

        Args:
            total_items: Total number of items to process
            item_type: Description of item type (e.g., "items", "posts")
        """
        self.total_items = total_items
        self.item_type = item_type
        self.processed_items = 0
        self.successful_items = 0
        self.skipped_items = 0
        self.failed_items = 0
        self.start_time: Optional[float] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    def __enter__(self) -> 'ProgressTracker':
        """Enter progress tracking context."""
        self.start_time = time.time()
        self.logger.info(
            f"Starting processing of {self.total_items} {self.item_type}"
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit progress tracking context and log summary."""
        if self.start_time is None:
            return

        elapsed = time.time() - self.start_time

        if exc_type is not None:
            log_method = self.logger.error
        elif self.failed_items > 0:
            log_method = self.logger.warning
        else:
            log_method = self.logger.info

        log_method(f"=== Progress Summary: {self.item_type.upper()} ===")
        if exc_type is not None:
            log_method(f"Aborted after {self.processed_items}/{self.total_items}: {exc_val}")
        log_method(f"Total: {self.total_items}")
        log_method(f"Processed: {self.processed_items}")
        log_method(f"Successful: {self.successful_items}")
        log_method(f"Skipped: {self.skipped_items}")
        log_method(f"Failed: {self.failed_items}")
        log_method(f"Elapsed Time: {self._format_elapsed(elapsed)}")

    def increment(self, success: bool = True, skipped: bool = False) -> None:
        """
        Increment progress counter.

        Args:
            success: Whether the item was processed successfully
            skipped: Whether the item was intentionally skipped
        """
        self.processed_items += 1

        if skipped:
            self.skipped_items += 1
        elif success:
            self.successful_items += 1
        else:
            self.failed_items += 1

        # Log progress every 100 items or on failure
        if self.processed_items % 100 == 0 or not success:
            remaining = self.total_items - self.processed_items
            status = "Success" if success else "Failed"
            self.logger.info(
                f"Processed {self.processed_items}/{self.total_items} {self.item_type} "
                f"({remaining} remaining) - Last: {status}"
            )

    @staticmethod
    def _format_elapsed(seconds: float) -> str:
        """Format elapsed time in human-readable format."""
        if seconds < 60:
            return f"{seconds:.1f}s"

        minutes = int(seconds // 60)
        seconds = int(seconds % 60)

        if minutes < 60:
            return f"{minutes}m {seconds}s"

        hours = minutes // 60
        minutes = minutes % 60

        return f"{hours}h {minutes}m {seconds}s"


def log_section(title: str) -> None:
    """
    Log a decorative section header.

    Args:
        title: Section title to display
    """
    logger = logging.getLogger(LOGGER_NAME)

    separator = "=" * 60
    logger.info(separator)
    logger.info(f"  {title.upper()}")
    logger.info(separator)


def log_config(config: Dict[str, Any]) -> None:
    """
    Log effective configuration for debugging.

    Args:
        config: Configuration dictionary to log
    """
    logger = logging.getLogger(LOGGER_NAME)

    log_section("Configuration")

    export_settings = config.get('export', {})
    logger.info(f"Output Directory: {export_settings.get('output_directory', './content')}")
    logger.info(f"Paginate By: {export_settings.get('paginate_by', 5)}")
    logger.info(f"Section Index File: {export_settings.get('section_filename', '_index.md')}")
    logger.info(f"Confine To Output Root: {export_settings.get('confine_to_output_root', False)}")

    markdown = config.get('markdown', {})
    logger.info(f"Heading Style: {markdown.get('heading_style', 'ATX')}")
    logger.info(f"Bullets: {markdown.get('bullets', '-')}")
    logger.info(f"Newline Style: {markdown.get('newline_style', 'backslash')}")

    logging_settings = config.get('logging', {})
    logger.info(f"Log File: {logging_settings.get('file') or 'Not Set'}")
    logger.info(f"Show Progress: {logging_settings.get('show_progress', False)}")


__all__ = [
    'LOGGER_NAME',
    'LOG_LEVEL_ENV_VAR',
    'setup_logging',
    'ProgressTracker',
    'log_section',
    'log_config'
]
