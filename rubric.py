# rubric.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List


class Aspect(str, Enum):
    STRUCTURE = "Structure & Organization"
    COHERENCE = "Coherence & Argument"
    GRAMMAR = "Grammar & Style"


@dataclass(frozen=True)
class RubricAspect:
    aspect: Aspect
    label: str
    description: str
    max_points: int = 10


# Fixed rubric, in the order rows are rendered
GLOBAL_RUBRIC: List[RubricAspect] = [
    RubricAspect(
        aspect=Aspect.STRUCTURE,
        label="Flow and paragraphing",
        description="Length close to the ideal of roughly 300 words.",
    ),
    RubricAspect(
        aspect=Aspect.COHERENCE,
        label="Logical progression of ideas",
        description="Text is segmented into sentences rather than one run-on block.",
    ),
    RubricAspect(
        aspect=Aspect.GRAMMAR,
        label="Mechanics and tone",
        description="Measured tone with few exclamation marks.",
    ),
]
