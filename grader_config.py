from dataclasses import dataclass

from grading_serialization import EMPTY_INSIGHTS_MESSAGE
from mock_grader import DEFAULT_TITLE


@dataclass(frozen=True)
class GraderConfig:
    default_title: str = DEFAULT_TITLE
    grade_delay_seconds: float = 0.7
    regrade_delay_seconds: float = 0.65
    empty_insights_message: str = EMPTY_INSIGHTS_MESSAGE

    run_button_label: str = "Run AI Grade"
    grading_label: str = "Analyzing..."
    regrading_label: str = "Regrading..."

    empty_submission_notice: str = "Please paste a student submission before running the grade."
    nothing_to_regrade_notice: str = "No submission to regrade."
    nothing_to_copy_notice: str = "Nothing to copy yet."
    copy_failed_notice: str = "Unable to copy automatically — please copy manually."
