"""
Logging configuration for talisman.

Provides environment-aware logging that:
- Uses stderr so diagnostics never mix with hook output on stdout
- Outputs JSON when LOG_FORMAT=json (CI and container logs)
- Provides human-readable output for local runs
- Supports an optional rotating log file
"""

import sys
import logging
import json
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Any

HUMAN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log collectors"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'component': record.name,
            'message': record.getMessage(),
            'pid': os.getpid(),
        }

        # Fields attached through log_with_context
        if hasattr(record, 'extra'):
            log_data.update(record.extra)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _resolve_level(level_str: str) -> int:
    return getattr(logging, level_str.upper(), logging.INFO)


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure logging based on environment.

    Args:
        log_level: Override log level (defaults to TALISMAN_LOG_LEVEL, then LOG_LEVEL, then INFO)
        log_file: Optional path of a rotating log file, in addition to stderr
        json_format: Emit JSON lines (defaults to LOG_FORMAT=json)
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
    """
    level_str = (
        log_level
        or os.environ.get('TALISMAN_LOG_LEVEL')
        or os.environ.get('LOG_LEVEL', 'INFO')
    )
    level = _resolve_level(level_str)

    if json_format is None:
        json_format = os.environ.get('LOG_FORMAT', '').lower() == 'json'

    formatter = JsonFormatter() if json_format else logging.Formatter(HUMAN_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    logger = logging.getLogger('talisman')
    logger.debug(f"Logging configured - Level: {level_str.upper()}, JSON: {json_format}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (e.g., logging.INFO)
        message: Log message
        **context: Additional fields to include in structured logs
    """
    extra = {'extra': context} if context else {}
    logger.log(level, message, extra=extra)
