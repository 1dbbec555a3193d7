"""
Core utilities for Scoreline.
Common functionality used across the entire package.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ..config.settings import settings


class LoggerFactory:
    """Centralized logger configuration."""

    _configured = False

    @classmethod
    def setup_logging(cls, level: Optional[str] = None, format_string: Optional[str] = None):
        """Setup application-wide logging configuration."""
        if cls._configured:
            return

        if format_string is None:
            format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        logging.basicConfig(
            level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
            format=format_string,
            handlers=[logging.StreamHandler()]
        )
        cls._configured = True

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a configured logger instance."""
        LoggerFactory.setup_logging()
        return logging.getLogger(name)


def parse_datetime(value) -> Optional[datetime]:
    """
    Parse an upstream ISO-8601 timestamp into an aware UTC datetime.

    ESPN emits both "2024-03-15T23:30Z" and "2024-03-15T23:30:00.000Z".
    Naive values are taken as UTC. Returns None when unparseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


__all__ = [
    'LoggerFactory',
    'parse_datetime',
]
