"""
Structured logging configuration with audit event tracking.

This module provides logging configuration for archive operations and
an audit trail of every change made to an archive's contents, with
JSON formatting and archive context preserved on each record.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from catalog.core.settings import settings


class ArchiveContextFilter(logging.Filter):
    """Add archive context to log records."""

    def filter(self, record):
        # Add default archive fields if not present
        if not hasattr(record, 'event_type'):
            record.event_type = 'application'
        if not hasattr(record, 'title'):
            record.title = None
        if not hasattr(record, 'material_type'):
            record.material_type = None

        return True


class CustomJSONFormatter(JsonFormatter):
    """Custom JSON formatter with archive context."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        # Add timestamp in ISO format (timezone-aware)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')

        # Add application context
        log_record['app_name'] = settings.app_name
        log_record['environment'] = settings.environment
        log_record['version'] = settings.app_version

        # Ensure level is always present
        log_record['level'] = record.levelname

        archive_fields = [
            'event_type', 'title', 'material_type', 'action',
            'reason', 'count', 'capacity', 'changes'
        ]
        for field in archive_fields:
            if hasattr(record, field) and getattr(record, field) is not None:
                log_record[field] = getattr(record, field)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    enable_json: bool = True,
) -> None:
    """Setup logging for the archive and audit loggers."""

    # Create logs directory if it doesn't exist
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

    # Configure formatters
    if enable_json:
        formatter = CustomJSONFormatter(
            fmt='%(timestamp)s %(level)s %(name)s %(message)s'
        )
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    # Configure handlers
    handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ArchiveContextFilter())
    handlers.append(console_handler)

    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ArchiveContextFilter())
        handlers.append(file_handler)

    level = getattr(logging, log_level.upper())
    for logger in (archive_logger, audit_logger):
        logger.setLevel(level)
        logger.propagate = False

        # Re-running setup replaces rather than stacks handlers
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)


# Initialize loggers
archive_logger = logging.getLogger('archive')
audit_logger = logging.getLogger('audit')


class AuditLogger:
    """Specialized logger for archive audit trails."""

    def __init__(self, enabled: bool = True):
        self.logger = audit_logger
        self.enabled = enabled

    def log_data_modification(
        self,
        action: str,
        title: str,
        material_type: Optional[str],
        count: int,
        changes: Optional[Dict[str, Any]] = None,
    ):
        """Log a change to an archive's contents."""
        if not self.enabled:
            return
        self.logger.info(
            f"Data modification: {action} {title!r}",
            extra={
                'event_type': 'data_modification',
                'action': action,
                'title': title,
                'material_type': material_type,
                'count': count,
                'changes': changes,
            }
        )

    def log_rejected_operation(
        self,
        action: str,
        title: Optional[str],
        reason: str,
        count: Optional[int] = None,
        capacity: Optional[int] = None,
    ):
        """Log a mutation the archive refused."""
        if not self.enabled:
            return
        self.logger.warning(
            f"Rejected {action} {title!r}: {reason}",
            extra={
                'event_type': 'rejected_operation',
                'action': action,
                'title': title,
                'reason': reason,
                'count': count,
                'capacity': capacity,
            }
        )


# Initialize specialized loggers
audit_event_logger = AuditLogger(enabled=settings.audit_log_enabled)


# Initialize logging on module import
setup_logging(
    log_level=settings.log_level,
    log_file=settings.log_file,
    enable_json=settings.log_format.lower() == "json",
)
