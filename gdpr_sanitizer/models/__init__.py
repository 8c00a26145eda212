"""Data models for the GDPR sanitizer."""

from .records import (
    CommentRecord,
    CommentStatus,
    CommentUpdate,
    Site,
    UserLookup,
    UserRecord,
    UserReplacement,
    UserUpdate,
)
from .run import RunResult
from .config import Settings, get_settings

__all__ = [
    "CommentRecord",
    "CommentStatus",
    "CommentUpdate",
    "Site",
    "UserLookup",
    "UserRecord",
    "UserReplacement",
    "UserUpdate",
    "RunResult",
    "Settings",
    "get_settings",
]
