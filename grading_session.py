# grading_session.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from grader_config import GraderConfig
from grading_serialization import format_feedback_report
from mock_grader import GradeResult, Submission, js_trim, mock_grade, resolve_title

logger = logging.getLogger(__name__)


# ----------------- Errors -----------------


class GradingSessionError(Exception):
    """A user action that cannot be carried out in the current session state."""


class EmptySubmissionError(GradingSessionError):
    pass


class NothingToRegradeError(GradingSessionError):
    pass


class NothingToCopyError(GradingSessionError):
    pass


# ----------------- Session -----------------


@dataclass(frozen=True)
class SessionRecord:
    submission: Submission
    result: GradeResult


def simulate_latency(seconds: float, sleep: Callable[[float], None] = time.sleep) -> None:
    if seconds > 0:
        sleep(seconds)


class GradingSession:
    """Holds the most recent submission and result for regrade and copy actions."""

    def __init__(self, config: GraderConfig | None = None) -> None:
        self.config = config or GraderConfig()
        self.last: Optional[SessionRecord] = None

    def build_submission(self, title: str | None, text: str | None) -> Submission:
        return Submission(
            text=text or "",
            title=resolve_title(title, self.config.default_title),
        )

    def grade(self, title: str | None, text: str | None) -> GradeResult:
        submission = self.build_submission(title, text)
        if not js_trim(submission.text):
            logger.info("rejected empty submission")
            raise EmptySubmissionError(self.config.empty_submission_notice)
        return self._grade_and_store(submission)

    def regrade(self) -> GradeResult:
        if self.last is None:
            raise NothingToRegradeError(self.config.nothing_to_regrade_notice)
        logger.info("regrading %r", self.last.submission.title)
        return self._grade_and_store(self.last.submission)

    def export_report(self) -> str:
        if self.last is None:
            raise NothingToCopyError(self.config.nothing_to_copy_notice)
        return format_feedback_report(
            self.last.result,
            empty_insights_message=self.config.empty_insights_message,
        )

    def clear(self) -> None:
        logger.debug("cleared session")
        self.last = None

    def _grade_and_store(self, submission: Submission) -> GradeResult:
        result = mock_grade(submission)
        self.last = SessionRecord(submission=submission, result=result)
        logger.info("graded %r: %d%%", result.title, result.score)
        return result
