"""Utility functions and helpers."""

from .logger import setup_logging, get_logger, PIIRedactor
from .audit_logger import AuditLogger, AuditEvent

__all__ = ["setup_logging", "get_logger", "PIIRedactor", "AuditLogger", "AuditEvent"]
