# mock_grader.py

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Tuple

from rubric import GLOBAL_RUBRIC, Aspect

logger = logging.getLogger(__name__)


DEFAULT_TITLE = "Untitled Submission"

IDEAL_WORD_COUNT = 300
SHORT_SUBMISSION_WORDS = 120
COHERENCE_FLOOR = 0.4
GRAMMAR_FLOOR = 0.4

READABILITY_WEIGHT = 0.4
COHERENCE_WEIGHT = 0.35
GRAMMAR_WEIGHT = 0.25

INSIGHT_SHORT = "Submission is short — expand key arguments with concrete examples."
INSIGHT_ABRUPT_ENDING = "Ends abruptly — add a concluding sentence."
INSIGHT_REVISE_STRUCTURE = "Revise structure and use clearer topic sentences for each paragraph."
INSIGHT_POLISH = "Great work — polish grammar and include references or citations."

# ECMAScript \s: includes U+FEFF, excludes U+001C-U+001F and U+0085
_WHITESPACE = "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
_EDGE_WHITESPACE_RX = re.compile(rf"^{_WHITESPACE}+|{_WHITESPACE}+\Z")
_WHITESPACE_RX = re.compile(rf"{_WHITESPACE}+")


# ----------------- Data models -----------------


@dataclass(frozen=True)
class Submission:
    text: str
    title: str = ""


@dataclass(frozen=True)
class RubricItem:
    aspect: str
    comment: str
    points: int


@dataclass(frozen=True)
class GradeResult:
    title: str
    score: int
    rubric: Tuple[RubricItem, ...]
    insights: Tuple[str, ...]


@dataclass(frozen=True)
class TextStats:
    word_count: int
    sentence_count: int
    exclamation_count: int
    has_period: bool
    ends_with_period: bool

    @property
    def readability(self) -> float:
        return clamp(1 - abs(IDEAL_WORD_COUNT - self.word_count) / 600, 0, 1)

    @property
    def coherence(self) -> float:
        if not self.has_period:
            return COHERENCE_FLOOR
        return clamp(0.7 + min(0.3, self.sentence_count / 20), 0, 1)

    @property
    def grammar_score(self) -> float:
        return clamp(1 - self.exclamation_count / 20, GRAMMAR_FLOOR, 1)


# ----------------- Helpers -----------------


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ``.5`` going up, unlike ``round``."""
    return int(math.floor(value + 0.5))


def js_trim(text: str) -> str:
    """Trim whitespace the way ``String.prototype.trim`` does."""
    return _EDGE_WHITESPACE_RX.sub("", text)


def compute_text_stats(text: str | None) -> TextStats:
    raw = text or ""
    trimmed = js_trim(raw)
    sentences = [segment for segment in trimmed.split(".") if js_trim(segment)]
    return TextStats(
        word_count=len([word for word in _WHITESPACE_RX.split(trimmed) if word]),
        sentence_count=len(sentences),
        # counted on the untrimmed text
        exclamation_count=raw.count("!"),
        has_period="." in trimmed,
        ends_with_period=trimmed.endswith("."),
    )


def resolve_title(title: str | None, default: str = DEFAULT_TITLE) -> str:
    return js_trim(title or "") or default


# ----------------- Grading -----------------


def _rubric_items(stats: TextStats) -> Tuple[RubricItem, ...]:
    values = {
        Aspect.STRUCTURE: stats.readability,
        Aspect.COHERENCE: stats.coherence,
        Aspect.GRAMMAR: stats.grammar_score,
    }
    items = []
    for definition in GLOBAL_RUBRIC:
        value = values[definition.aspect]
        items.append(
            RubricItem(
                aspect=definition.aspect.value,
                comment=f"{definition.label} — {round_half_up(value * 100)}%",
                points=round_half_up(value * definition.max_points),
            )
        )
    return tuple(items)


def _insights(stats: TextStats, score: int) -> Tuple[str, ...]:
    insights = []
    if stats.word_count < SHORT_SUBMISSION_WORDS:
        insights.append(INSIGHT_SHORT)
    if not stats.ends_with_period:
        insights.append(INSIGHT_ABRUPT_ENDING)
    if score < 60:
        insights.append(INSIGHT_REVISE_STRUCTURE)
    if score > 85:
        insights.append(INSIGHT_POLISH)
    return tuple(insights)


def mock_grade(submission: Submission) -> GradeResult:
    """Grade a submission with closed-form text statistics.

    Never raises: empty text yields a low but well-formed result. Identical
    submissions always produce identical results.
    """
    stats = compute_text_stats(submission.text)
    weighted = (
        READABILITY_WEIGHT * stats.readability
        + COHERENCE_WEIGHT * stats.coherence
        + GRAMMAR_WEIGHT * stats.grammar_score
    )
    score = round_half_up(weighted * 100)
    logger.debug(
        "graded submission: words=%d sentences=%d exclamations=%d score=%d",
        stats.word_count,
        stats.sentence_count,
        stats.exclamation_count,
        score,
    )
    return GradeResult(
        title=submission.title if js_trim(submission.title or "") else DEFAULT_TITLE,
        score=score,
        rubric=_rubric_items(stats),
        insights=_insights(stats, score),
    )


def grade(title: str | None, text: str | None) -> GradeResult:
    return mock_grade(Submission(text=text or "", title=title or ""))
