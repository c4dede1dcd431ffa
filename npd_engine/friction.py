"""Friction-keyword heuristics for pain intensity and frequency proxies."""

from __future__ import annotations

import re

FRICTION_KEYWORDS = (
    "nothing works", "too expensive", "hard water", "hard water issues",
    "alternative to", "waste of money", "don't buy", "stopped using",
    "didn't work", "still have", "no results", "desperate", "tried everything",
    "any recommendations", "please help", "crying", "frustrated", "give up",
    "patchy", "hormonal acne", "post workout", "hair fall", "dandruff",
    "pediatrician warned", "doctor said", "picky eater", "refuses to eat",
    "not gaining weight", "below average height", "nutritional gap",
    "won't swallow", "spits out", "worried about growth", "percentile dropped",
)

MAX_INTENSITY = 9.0
MAX_FREQUENCY = 50
TRENDING_FREQUENCY = 35
MIN_FREQUENCY = 5

_UPVOTES = re.compile(r"(\d+)\s*(?:upvotes?|points?|votes?)")
_COMMENTS = re.compile(r"(\d+)\s*comments?")


def detected_friction_keywords(text: str) -> list[str]:
    lower = text.lower()
    return [k for k in FRICTION_KEYWORDS if k in lower]


def score_pain_intensity(text: str) -> float:
    """5 baseline plus half a point per friction keyword, capped at 9."""
    hits = len(detected_friction_keywords(text))
    return min(5 + hits * 0.5, MAX_INTENSITY)


def score_frequency(text: str) -> int:
    """Volume proxy from vote/comment counts, trend words, or friction density."""
    lower = text.lower()
    match = _UPVOTES.search(lower)
    if match:
        return min(int(match.group(1)), MAX_FREQUENCY)
    match = _COMMENTS.search(lower)
    if match:
        return max(min(int(match.group(1)) * 2, MAX_FREQUENCY), MIN_FREQUENCY)
    if any(w in lower for w in ("rising", "trending", "yoy")):
        return TRENDING_FREQUENCY
    return max(len(detected_friction_keywords(lower)) * 4, MIN_FREQUENCY)
