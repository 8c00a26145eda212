"""Data model for the outcome of a sanitization run."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class RunResult(BaseModel):
    """Result of a complete sanitization run."""

    # Scope
    excluded_user_ids: List[int] = Field(default_factory=list)
    site_id: Optional[int] = Field(None, description="Site the run was limited to")

    # Counts
    users_updated: int = Field(0)
    comments_updated: int = Field(0)
    comments_skipped: int = Field(0, description="Comments gone before they could be updated")
    warnings: List[str] = Field(default_factory=list)

    # Timing
    start_time: datetime = Field(default_factory=datetime.utcnow)
    end_time: Optional[datetime] = None
    duration_seconds: Optional[float] = None

    # Status
    status: str = Field("in_progress", description="Run status")
    error_message: Optional[str] = None

    def warn(self, message: str) -> None:
        """Record a non-fatal condition."""
        self.warnings.append(message)

    def complete(self) -> None:
        """Mark run as completed."""
        self.end_time = datetime.utcnow()
        self.duration_seconds = (self.end_time - self.start_time).total_seconds()
        self.status = "completed"

    def fail(self, error: str) -> None:
        """Mark run as failed."""
        self.end_time = datetime.utcnow()
        self.duration_seconds = (self.end_time - self.start_time).total_seconds()
        self.status = "failed"
        self.error_message = error

    def success_message(self) -> str:
        """Summary line naming the exclusions and site scope, if any."""
        if self.excluded_user_ids:
            ids = ",".join(str(user_id) for user_id in self.excluded_user_ids)
            if self.site_id is not None:
                return f"All comments and users except: '{ids}' on site '{self.site_id}' rewritten."
            return f"All comments and users except: '{ids}' rewritten."
        if self.site_id is not None:
            return f"All comments and users on site '{self.site_id}' rewritten."
        return "All comments and users rewritten."
