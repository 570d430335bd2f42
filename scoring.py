"""
Quiz scoring. Turns quiz answers into category percentages and ranks majors.

Each quiz option carries an encoded tuple ``["<Category>", <delta>]`` in its
``e`` field. Deltas are summed per category and normalized against a fixed
base score, then majors are ranked by the dot product of those percentages
with their category weights.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from reference_data import load_major_weights


class Category(str, Enum):
    ANALYTICAL = "Analytical"
    DATA = "Data"
    AI = "AI"
    SOFTWARE_DEV = "SoftwareDev"
    HARDWARE = "Hardware"
    SECURITY = "Security"
    CREATIVE = "Creative"

    @classmethod
    def lookup(cls, name: Any) -> Category | None:
        if not isinstance(name, str):
            return None
        try:
            return cls(name)
        except ValueError:
            return None


# Raw points that map to 100% for each category
BASE_SCORES: dict[Category, int] = {
    Category.ANALYTICAL: 820,
    Category.DATA: 1000,
    Category.AI: 820,
    Category.SOFTWARE_DEV: 200,
    Category.HARDWARE: 260,
    Category.SECURITY: 200,
    Category.CREATIVE: 700,
}

CATEGORY_NAMES: list[str] = [c.value for c in Category]

# Plain ASCII decimals with optional exponent; no underscores, no non-ASCII digits
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class InvalidSubmissionError(ValueError):
    """The submission as a whole is unusable (not a list, or empty)."""


@dataclass
class RankedMajor:
    major: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"major": self.major, "score": self.score}


def _as_number(value: Any) -> float | None:
    """Coerce a delta to a finite float, or None."""
    if isinstance(value, bool) or value is None:
        return None
    if not isinstance(value, (int, float)):
        if not isinstance(value, str):
            return None
        value = value.strip()
        if not _DECIMAL.fullmatch(value):
            return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def decode_answer(answer: Any) -> tuple[Category, float] | None:
    """Decode one quiz answer to (category, delta). Malformed input gives None."""
    if not isinstance(answer, Mapping):
        return None
    encoded = answer.get("e")
    if not isinstance(encoded, str):
        return None

    try:
        parsed = json.loads(encoded)
    except ValueError:
        return None

    if not isinstance(parsed, list) or len(parsed) != 2:
        return None

    category = Category.lookup(parsed[0])
    delta = _as_number(parsed[1])
    if category is None or delta is None:
        return None
    return category, delta


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize(totals: Mapping[Category, float]) -> dict[str, int]:
    """Convert raw totals to integer percentages of each category's base score.

    Results are not clamped: negative totals and totals above the base score
    pass straight through.
    """
    return {
        c.value: round_half_up(totals.get(c, 0) / BASE_SCORES[c] * 100)
        for c in Category
    }


def compute_scores(answers: Any) -> dict[str, int]:
    """Score a quiz submission.

    Raises InvalidSubmissionError when ``answers`` is not a non-empty list.
    Individual malformed answers are skipped.
    """
    if not isinstance(answers, (list, tuple)) or not answers:
        raise InvalidSubmissionError("invalid test submission")

    totals: dict[Category, float] = {c: 0 for c in Category}
    for answer in answers:
        decoded = decode_answer(answer)
        if decoded is None:
            continue
        category, delta = decoded
        totals[category] += delta

    return normalize(totals)


def rank_majors(
    scores: Mapping[str, float],
    weights: Mapping[str, Mapping[str, float]],
) -> list[RankedMajor]:
    """Rank every major by the weighted sum of the user's category scores.

    Missing scores and missing weights count as zero. Majors with equal
    scores keep their order from the weight table.
    """
    results: list[RankedMajor] = []
    for major, major_weights in weights.items():
        score = 0
        for category, user_value in scores.items():
            weight = major_weights.get(category) if major_weights else None
            score += (user_value or 0) * (weight or 0)
        results.append(RankedMajor(major=major, score=score))

    results.sort(key=lambda r: r.score, reverse=True)
    return results


def recommend_majors(user_scores: Mapping[str, float]) -> list[RankedMajor]:
    """Load the weight table and rank all majors for ``user_scores``."""
    return rank_majors(user_scores, load_major_weights())


def scores_from_query(args: Mapping[str, Any]) -> dict[str, float]:
    """Rebuild category scores from query parameters; bad or missing values are 0."""
    scores: dict[str, float] = {}
    for name in CATEGORY_NAMES:
        raw = args.get(name)
        value = _as_number(raw) if raw is not None else None
        if value is None:
            scores[name] = 0
        else:
            scores[name] = int(value) if value.is_integer() else value
    return scores
