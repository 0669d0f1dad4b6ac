"""Task data model for tasklist."""

from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
import uuid


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Single entry of the task list."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), frozen=True)
    name: str = Field(..., description="Task name, may be empty")
    description: str = Field(default="", description="Free text description")
    date: datetime = Field(default_factory=utc_now, description="Due date")
    is_completed: bool = Field(default=False, alias="isCompleted")

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are stored as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        """True when the due date lies strictly before ``now``."""
        if now is None:
            now = utc_now()
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return self.date < now

    def to_json_dict(self) -> dict:
        """Serialize with the on-disk field names (``isCompleted``)."""
        return self.model_dump(mode="json", by_alias=True)
