"""
Confidence Estimator

Coverage confidence from which optional viewing angles were captured.
Image content is never inspected; only presence matters.
"""
from enum import Enum
from typing import AbstractSet, Iterable, Optional

from skincheck.config import settings

BASE_CONFIDENCE = 72
SIDE_VIEWS_BONUS = 15
CLOSEUP_BONUS = 8


class CaptureAngle(str, Enum):
    """Viewing angles the capture step can supply."""
    FRONT = "front"
    LEFT = "left"
    RIGHT = "right"
    CLOSEUP = "closeup"


CaptureSet = AbstractSet[CaptureAngle]


def to_capture_set(angles: Iterable) -> CaptureSet:
    """Normalize strings or CaptureAngle members into a frozen set."""
    return frozenset(CaptureAngle(a) for a in angles)


class ConfidenceEstimator:
    """72 base, +15 with both side views, +8 with a close-up."""

    def __init__(self, ceiling: Optional[int] = None):
        self._ceiling = ceiling if ceiling is not None else settings.confidence_ceiling

    def estimate(self, captures: CaptureSet) -> int:
        confidence = BASE_CONFIDENCE
        if CaptureAngle.LEFT in captures and CaptureAngle.RIGHT in captures:
            confidence += SIDE_VIEWS_BONUS
        if CaptureAngle.CLOSEUP in captures:
            confidence += CLOSEUP_BONUS
        return min(confidence, self._ceiling)
