"""Logging configuration with holder identity masking."""

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from debenture.lib.config import DATA_DIR, LOG_FILE_ENV_VAR


class HolderIdFilter(logging.Filter):
    """Filter to mask debenture holder identities in log messages."""

    # A holder identity rendered as hex is exactly 64 characters (32 bytes)
    HOLDER_PATTERN = re.compile(r"\b([0-9a-fA-F]{4})[0-9a-fA-F]{56}([0-9a-fA-F]{4})\b")
    MASK = r"\1…\2"

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log record to mask holder identities.

        Args:
            record: Log record to filter

        Returns:
            True to keep the record, False to drop it
        """
        if isinstance(record.msg, str):
            record.msg = self.HOLDER_PATTERN.sub(self.MASK, record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._mask_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, (list, tuple)):
                record.args = tuple(self._mask_value(arg) for arg in record.args)

        return True

    def _mask_value(self, value: Any) -> Any:
        """Mask holder identities in any value type."""
        if isinstance(value, (bytes, bytearray)) and len(value) == 32:
            return self.HOLDER_PATTERN.sub(self.MASK, value.hex())
        if isinstance(value, str):
            return self.HOLDER_PATTERN.sub(self.MASK, value)
        return value


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """
    Configure logging with holder masking and file rotation.

    Args:
        level: Logging level (default: INFO)
        log_file: Path to log file (default: ~/.debenture/debenture.log)
                 Pass an empty string to disable file logging

    Example:
        >>> from debenture.lib.logging_config import setup_logging
        >>> setup_logging(logging.DEBUG, log_file="")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    holder_filter = HolderIdFilter()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(holder_filter)
        root_logger.addHandler(console_handler)

        if log_file is None:
            log_file = os.getenv(LOG_FILE_ENV_VAR, str(DATA_DIR / "debenture.log"))

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            # Rotating file handler: 10MB per file, keep 5 backup files
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(holder_filter)
            root_logger.addHandler(file_handler)
    else:
        for handler in root_logger.handlers:
            if not any(isinstance(f, HolderIdFilter) for f in handler.filters):
                handler.addFilter(holder_filter)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with holder masking enabled.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, HolderIdFilter) for f in logger.filters):
        logger.addFilter(HolderIdFilter())

    return logger
