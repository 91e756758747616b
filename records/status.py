"""Default submission status classifier."""

from .models import Assignment, SubmissionStatus


def get_submission_status(assignment: Assignment) -> str:
    """Return the submission status value for an assignment.

    Records exported with a precomputed status keep it as-is, including
    values outside the known set. Otherwise the assignment is treated as
    not yet submitted.
    """
    if assignment.submission_status:
        return assignment.submission_status
    if assignment.is_quiz:
        return SubmissionStatus.QUIZ_NOT_SUBMITTED
    return SubmissionStatus.NOT_SUBMITTED
