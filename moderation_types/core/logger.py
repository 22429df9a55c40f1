import logging
import sys
from typing import Optional
from pathlib import Path

from moderation_types.core.config import settings


class StructuredFormatter(logging.Formatter):
    """Formatter that appends moderation-specific record attributes."""

    EXTRA_FIELDS = ("flagged", "category_count", "error_code", "source")

    def __init__(self, service_name: str):
        super().__init__(datefmt='%Y-%m-%d %H:%M:%S')
        self.service_name = service_name

    def format(self, record):
        log_data = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'service': self.service_name,
        }
        log_data.update(
            (field, getattr(record, field))
            for field in self.EXTRA_FIELDS
            if hasattr(record, field)
        )
        return f"[{record.levelname}] {record.getMessage()} | {log_data}"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    service_name: str = settings.app_name
) -> logging.Logger:
    """
    Configure the package logger.

    Records go to ``log_file`` when one is given, otherwise to stdout.

    Args:
        level: Logging level name
        log_file: Optional file path for log output
        service_name: Logger name and service label in each record
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(level.upper())

    if logger.handlers:
        return logger

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(service_name))
    logger.addHandler(handler)

    return logger

logger = setup_logging(
    level=settings.log_level,
    log_file=settings.log_file,
    service_name=settings.app_name
)
