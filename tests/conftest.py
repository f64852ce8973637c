from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def build_essay(sentences: int, words_per_sentence: int) -> str:
    """Deterministic essay with a known word and sentence count, ending in '.'."""
    sentence = " ".join(["word"] * (words_per_sentence - 1) + ["end."])
    return " ".join([sentence] * sentences)


@pytest.fixture
def ideal_essay() -> str:
    return build_essay(10, 30)
