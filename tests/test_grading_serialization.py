from __future__ import annotations

from conftest import build_essay
from grading_serialization import (
    format_feedback_report,
    grade_result_from_storage,
    grade_result_to_storage,
    submission_from_storage,
)
from mock_grader import GradeResult, Submission, grade


def test_report_format_for_empty_text():
    report = format_feedback_report(grade("Draft", ""))

    assert report == (
        "Title: Draft\n"
        "Score: 59%\n"
        "\n"
        "Rubric:\n"
        "- Structure & Organization: Flow and paragraphing — 50% (Points: 5)\n"
        "- Coherence & Argument: Logical progression of ideas — 40% (Points: 4)\n"
        "- Grammar & Style: Mechanics and tone — 100% (Points: 10)\n"
        "\n"
        "Insights:\n"
        "- Submission is short — expand key arguments with concrete examples.\n"
        "- Ends abruptly — add a concluding sentence.\n"
        "- Revise structure and use clearer topic sentences for each paragraph.\n"
    )


def test_report_substitutes_fallback_when_no_insights():
    result = GradeResult(title="Quiet", score=80, rubric=(), insights=())

    report = format_feedback_report(result)

    assert report.endswith("Insights:\n- No major issues detected. Well done!\n")
    custom = format_feedback_report(result, empty_insights_message="All good.")
    assert custom.endswith("Insights:\n- All good.\n")


def test_storage_round_trip_keeps_result_and_payload():
    text = build_essay(4, 25)
    submission = Submission(text=text, title="Essay")
    result = grade(submission.title, submission.text)

    data = grade_result_to_storage(result, submission)

    assert data["version"] == 1
    assert data["payload"] == {"title": "Essay", "text": text}
    assert grade_result_from_storage(data) == result
    assert submission_from_storage(data) == submission


def test_storage_without_submission_has_no_payload():
    data = grade_result_to_storage(grade("", "short"))

    assert "payload" not in data
    assert submission_from_storage(data) is None
