from __future__ import annotations
from typing import Any, Dict, Optional

from mock_grader import GradeResult, RubricItem, Submission

EMPTY_INSIGHTS_MESSAGE = "No major issues detected. Well done!"


def format_feedback_report(
    result: GradeResult,
    *,
    empty_insights_message: str = EMPTY_INSIGHTS_MESSAGE,
) -> str:
    """Render a GradeResult as the plain-text feedback copied to the clipboard."""
    lines = [
        f"Title: {result.title}",
        f"Score: {result.score}%",
        "",
        "Rubric:",
    ]
    lines.extend(
        f"- {item.aspect}: {item.comment} (Points: {item.points})"
        for item in result.rubric
    )
    lines.extend(["", "Insights:"])
    insights = result.insights or (empty_insights_message,)
    lines.extend(f"- {insight}" for insight in insights)
    return "\n".join(lines) + "\n"


def grade_result_to_storage(
    gr: GradeResult, submission: Optional[Submission] = None
) -> Dict[str, Any]:
    """Convert a GradeResult (and optionally its submission) into a JSON-safe dict."""
    data: Dict[str, Any] = {
        "version": 1,
        "title": gr.title,
        "score": gr.score,
        "rubric": [
            {
                "aspect": item.aspect,
                "comment": item.comment,
                "points": item.points,
            }
            for item in gr.rubric
        ],
        "insights": list(gr.insights),
    }
    if submission is not None:
        data["payload"] = {"title": submission.title, "text": submission.text}
    return data


def grade_result_from_storage(data: Dict[str, Any]) -> GradeResult:
    """Rebuild a GradeResult from its stored dict form."""
    rubric = tuple(
        RubricItem(
            aspect=str(item["aspect"]),
            comment=str(item.get("comment", "")),
            points=int(item["points"]),
        )
        for item in data.get("rubric", [])
    )

    return GradeResult(
        title=str(data["title"]),
        score=int(data["score"]),
        rubric=rubric,
        insights=tuple(str(insight) for insight in data.get("insights", [])),
    )


def submission_from_storage(data: Dict[str, Any]) -> Optional[Submission]:
    payload = data.get("payload")
    if not payload:
        return None
    return Submission(text=str(payload.get("text", "")), title=str(payload.get("title", "")))
