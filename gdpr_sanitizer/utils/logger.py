"""Logging utilities with automatic PII redaction."""

import re
import sys
from typing import Optional
from loguru import logger
from gdpr_sanitizer.models import get_settings


class PIIRedactor:
    """Redacts PII from log messages."""

    # Order matters: URLs may embed emails or IP addresses
    PATTERNS = {
        "url": r"\bhttps?://[^\s'\"]+",
        "email": r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b",
        "ip_address": r"\b(?:\d{1,3}\.){3}\d{1,3}\b",
    }

    @classmethod
    def redact(cls, message: str) -> str:
        """
        Redact PII from a message.

        Args:
            message: Log message to redact

        Returns:
            Message with PII replaced with [REDACTED_{TYPE}]
        """
        redacted = message

        for pii_type, pattern in cls.PATTERNS.items():
            redacted = re.sub(pattern, f"[REDACTED_{pii_type.upper()}]", redacted, flags=re.IGNORECASE)

        return redacted


def redaction_filter(record: dict) -> bool:
    """
    Filter function for loguru that redacts PII.

    Args:
        record: Log record dictionary

    Returns:
        True (always log, but modify the record)
    """
    if get_settings().enable_pii_redaction:
        record["message"] = PIIRedactor.redact(record["message"])

    return True


def setup_logging(log_file: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """
    Configure logging with PII redaction.

    Args:
        log_file: Path to log file (optional)
        log_level: Log level (default: INFO)
    """
    settings = get_settings()
    log_level = log_level or settings.log_level
    log_file = log_file or settings.log_file

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
        filter=redaction_filter,
    )

    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level=log_level,
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        filter=redaction_filter,
    )

    logger.debug("Logging initialized")


def get_logger(name: str):
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


# Initialize on import
try:
    setup_logging()
except (OSError, ValueError) as e:
    # Fallback basic logging
    logger.add(sys.stderr, level="INFO")
    logger.warning(f"Failed to initialize full logging: {e}")
