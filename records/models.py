"""Data models for LMS assignment and class records."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


QUIZ_TYPE = "QUZ"
GROUP_TYPE = "STU"


class SubmissionStatus:
    """Known submission status values produced by the status classifier."""

    SUBMITTED = "submitted"
    SUBMITTED_LATE = "submitted_late"
    NOT_SUBMITTED = "not_submitted"
    QUIZ_NOT_SUBMITTED = "quiz_not_submitted"
    IN_PROGRESS = "in_progress"


@dataclass
class ClassInfo:
    """Represents a class (course) an assignment belongs to."""

    id: str
    title: str
    description: str = field(default="")


@dataclass
class Assignment:
    """Represents a single assignment or quiz with a due date."""

    id: str
    class_id: str
    title: str
    due_date: str
    type: str = field(default="")
    group_type: str = field(default="")
    description: Optional[str] = field(default=None)
    submission_status: Optional[str] = field(default=None)  # precomputed upstream

    @property
    def is_quiz(self) -> bool:
        return self.type == QUIZ_TYPE

    @property
    def is_group(self) -> bool:
        return self.group_type == GROUP_TYPE

    def due_at(self) -> datetime:
        """Parse the due date into an instant.

        Naive timestamps and date-only values are taken as UTC.

        Raises:
            ValueError: If the due date is not an ISO-8601 date or datetime.
        """
        try:
            parsed = datetime.fromisoformat(self.due_date.strip())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Assignment {self.id}: invalid due date {self.due_date!r}"
            )
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
