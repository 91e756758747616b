"""Records module for LMS assignment and class data."""

from .loader import load_assignments, load_classes
from .models import Assignment, ClassInfo, SubmissionStatus
from .status import get_submission_status

__all__ = [
    "Assignment",
    "ClassInfo",
    "SubmissionStatus",
    "get_submission_status",
    "load_assignments",
    "load_classes",
]
