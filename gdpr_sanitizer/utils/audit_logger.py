"""Audit logging for sanitization runs."""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Dict, Any, Iterable
from enum import Enum

from gdpr_sanitizer.utils.logger import get_logger

logger = get_logger(__name__)


class AuditEvent(str, Enum):
    """Audit event types."""

    RUN_STARTED = "run_started"
    RUN_COMPLETED = "run_completed"
    RUN_FAILED = "run_failed"
    RUN_ABORTED = "run_aborted"


class AuditLogger:
    """Append-only trail of sanitization runs (JSON lines, no PII values)."""

    def __init__(self, audit_file: Optional[str] = None, enable_console: bool = False):
        """
        Initialize audit logger.

        Args:
            audit_file: Path to audit log file (JSON lines format)
            enable_console: Whether to also log to console
        """
        self.audit_file = Path(audit_file) if audit_file else Path("gdpr_sanitizer_audit.log")
        self.enable_console = enable_console

        self.audit_file.parent.mkdir(parents=True, exist_ok=True)

    def log(
        self,
        event: AuditEvent,
        user: str = "system",
        resource: Optional[str] = None,
        action: Optional[str] = None,
        result: str = "success",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an audit event.

        Args:
            event: Type of event
            user: Operator running the command
            resource: Store being sanitized
            action: Specific action taken
            result: Result of the action
            details: Additional details
        """
        audit_entry = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "event": event,
            "user": user,
            "resource": resource,
            "action": action,
            "result": result,
            "details": details or {},
        }

        self._write_audit_entry(audit_entry)

        if self.enable_console:
            logger.info(f"AUDIT: {event} - {user} - {resource} - {result}")

    def log_run_started(
        self,
        resource: str,
        excluded_user_ids: Iterable[int],
        site_id: Optional[int] = None,
        user: str = "system",
    ) -> None:
        """Log the start of a run with its scope."""
        self.log(
            event=AuditEvent.RUN_STARTED,
            user=user,
            resource=resource,
            action="sanitize",
            result="started",
            details={
                "excluded_user_ids": sorted(excluded_user_ids),
                "site_id": site_id,
            },
        )

    def log_run_completed(
        self,
        resource: str,
        users_updated: int,
        comments_updated: int,
        duration_seconds: Optional[float],
        user: str = "system",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log a successful run with its counts."""
        self.log(
            event=AuditEvent.RUN_COMPLETED,
            user=user,
            resource=resource,
            action="sanitize",
            result="success",
            details={
                "users_updated": users_updated,
                "comments_updated": comments_updated,
                "duration_seconds": duration_seconds,
                **(details or {}),
            },
        )

    def log_run_failed(self, resource: str, error: BaseException, user: str = "system") -> None:
        """Log a run stopped by an error."""
        self.log(
            event=AuditEvent.RUN_FAILED,
            user=user,
            resource=resource,
            action="sanitize",
            result="failure",
            details={"error_type": type(error).__name__, "error": str(error)},
        )

    def log_run_aborted(self, resource: str, user: str = "system") -> None:
        """Log a run the operator declined to confirm."""
        self.log(
            event=AuditEvent.RUN_ABORTED,
            user=user,
            resource=resource,
            action="sanitize",
            result="aborted",
        )

    def _write_audit_entry(self, entry: Dict[str, Any]) -> None:
        """
        Write audit entry to file.

        Args:
            entry: Audit entry dictionary
        """
        try:
            with open(self.audit_file, "a") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit log: {e}")

    def query_logs(
        self,
        event_type: Optional[AuditEvent] = None,
        user: Optional[str] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        limit: int = 100,
    ) -> list:
        """
        Query audit logs.

        Args:
            event_type: Filter by event type
            user: Filter by user
            start_time: Filter by start time
            end_time: Filter by end time
            limit: Maximum results to return

        Returns:
            List of matching audit entries
        """
        results = []

        try:
            with open(self.audit_file, "r") as f:
                for line in f:
                    if not line.strip():
                        continue

                    entry = json.loads(line)

                    if event_type and entry.get("event") != event_type:
                        continue

                    if user and entry.get("user") != user:
                        continue

                    if start_time or end_time:
                        entry_time = datetime.fromisoformat(
                            entry.get("timestamp", "").replace("Z", "")
                        )

                        if start_time and entry_time < start_time:
                            continue

                        if end_time and entry_time > end_time:
                            continue

                    results.append(entry)

                    if len(results) >= limit:
                        break

        except FileNotFoundError:
            logger.warning("Audit log file not found")

        return results

    def get_summary(self, hours: int = 24) -> Dict[str, Any]:
        """
        Get summary of audit events.

        Args:
            hours: Number of hours to look back

        Returns:
            Summary statistics
        """
        start_time = datetime.utcnow() - timedelta(hours=hours)

        logs = self.query_logs(start_time=start_time, limit=10000)

        summary = {
            "total_events": len(logs),
            "time_range_hours": hours,
            "events_by_type": {},
            "events_by_result": {},
            "users_updated": 0,
            "comments_updated": 0,
        }

        for entry in logs:
            event_type = entry.get("event", "unknown")
            result = entry.get("result", "unknown")

            summary["events_by_type"][event_type] = (
                summary["events_by_type"].get(event_type, 0) + 1
            )
            summary["events_by_result"][result] = (
                summary["events_by_result"].get(result, 0) + 1
            )

            if event_type == AuditEvent.RUN_COMPLETED:
                details = entry.get("details", {})
                summary["users_updated"] += details.get("users_updated", 0)
                summary["comments_updated"] += details.get("comments_updated", 0)

        return summary
