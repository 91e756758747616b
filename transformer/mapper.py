"""Mapping of LMS assignment records to calendar events."""

import logging
from datetime import datetime
from typing import Callable, Optional

from records.models import Assignment, ClassInfo, SubmissionStatus
from records.status import get_submission_status
from .ics_transformer import IcsTransformer
from .models import CalendarEvent


logger = logging.getLogger(__name__)

LOCATION = "LEB2"
ACTIVITY_URL = "https://app.leb2.org/class/{class_id}/activity/{assignment_id}"
UID_TEMPLATE = "assignment-{assignment_id}-class-{class_id}@assignwatch"

StatusClassifier = Callable[[Assignment], str]


def status_label(status: str) -> str:
    """Return the display label for a submission status.

    Unknown statuses are shown as-is.
    """
    match status:
        case SubmissionStatus.SUBMITTED:
            return "✓ Submitted"
        case SubmissionStatus.SUBMITTED_LATE:
            return "✓ Submitted (Late)"
        case SubmissionStatus.NOT_SUBMITTED:
            return "✗ Not Submitted"
        case SubmissionStatus.QUIZ_NOT_SUBMITTED:
            return "✗ Quiz Not Submitted"
        case SubmissionStatus.IN_PROGRESS:
            return "In Progress"
        case _:
            return status


def find_class(class_id: str, classes: list[ClassInfo]) -> Optional[ClassInfo]:
    """Return the first class record with a matching id, if any."""
    for class_info in classes:
        if class_info.id == class_id:
            return class_info
    return None


def describe_assignment(
    assignment: Assignment,
    class_info: Optional[ClassInfo],
    status: str
) -> str:
    """Compose the multi-line event description for an assignment."""
    class_title = class_info.title if class_info and class_info.title else "Unknown"
    class_description = class_info.description if class_info else ""

    lines = [
        f"Class: {class_title} - {class_description or ''}",
        f"Type: {'Quiz' if assignment.is_quiz else 'Assignment'}",
        f"Group: {'Group' if assignment.is_group else 'Individual'}",
        f"Status: {status_label(status)}",
        f"\nDetails: {assignment.description}" if assignment.description else None,
    ]
    return "\n".join(line for line in lines if line)


def assignment_to_event(
    assignment: Assignment,
    classes: list[ClassInfo],
    classify: StatusClassifier = get_submission_status
) -> CalendarEvent:
    """Convert a single assignment into a zero-duration calendar event.

    Args:
        assignment: Assignment to convert.
        classes: Class records to look the assignment's class up in.
        classify: Function returning the assignment's submission status.

    Returns:
        Calendar event starting and ending at the due date.

    Raises:
        ValueError: If the assignment's due date cannot be parsed.
    """
    class_info = find_class(assignment.class_id, classes)
    if class_info is None:
        logger.debug(
            "No class %s found for assignment %s",
            assignment.class_id, assignment.id
        )

    due_at = assignment.due_at()
    class_title = class_info.title if class_info else ""

    return CalendarEvent(
        title=f"{assignment.title} ({class_title or ''})",
        description=describe_assignment(assignment, class_info, classify(assignment)),
        start=due_at,
        end=due_at,
        location=LOCATION,
        url=ACTIVITY_URL.format(
            class_id=assignment.class_id, assignment_id=assignment.id
        ),
        uid=UID_TEMPLATE.format(
            assignment_id=assignment.id, class_id=assignment.class_id
        ),
    )


def map_assignments(
    assignments: list[Assignment],
    classes: list[ClassInfo],
    classify: StatusClassifier = get_submission_status
) -> list[CalendarEvent]:
    """Convert assignments to calendar events, preserving their order."""
    return [
        assignment_to_event(assignment, classes, classify)
        for assignment in assignments
    ]


def generate_ics(
    assignments: list[Assignment],
    classes: list[ClassInfo],
    classify: StatusClassifier = get_submission_status,
    clock: Optional[Callable[[], datetime]] = None
) -> str:
    """Generate an iCalendar document for a list of assignments.

    Args:
        assignments: Assignments to export, in output order.
        classes: Class records used for titles and descriptions.
        classify: Function returning an assignment's submission status.
        clock: Source of the DTSTAMP generation time.

    Returns:
        iCalendar document text.
    """
    events = map_assignments(assignments, classes, classify)
    return IcsTransformer(clock=clock).transform(events)
