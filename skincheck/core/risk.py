"""
Risk Classifier

Maps lesion-change and symptom answers to a coarse triage tier. The tier
is independent of the metric scores.
"""
from enum import Enum

from skincheck.core import questions as q
from skincheck.core.scoring import AnswerSet


class RiskLevel(str, Enum):
    """Risk tiers, ordered by severity rather than by value string."""
    SAFE = "safe"
    CAUTION = "caution"
    WARNING = "warning"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity >= other.severity


_SEVERITY = {
    RiskLevel.SAFE: 0,
    RiskLevel.CAUTION: 1,
    RiskLevel.WARNING: 2,
}


class RiskClassifier:
    """
    Top-down, first-match-wins classification:

    1. high-risk lesion change or inflammation -> WARNING
    2. medium-risk lesion change or sensitivity -> CAUTION
    3. otherwise -> SAFE
    """

    def classify(self, answers: AnswerSet) -> RiskLevel:
        lesion = answers.get(q.QuestionId.LESION_CHANGE)
        symptom = answers.get(q.QuestionId.SYMPTOM)

        if lesion == q.HIGH_RISK or symptom == q.INFLAMMATION:
            return RiskLevel.WARNING
        if lesion == q.MEDIUM_RISK or symptom == q.SENSITIVE:
            return RiskLevel.CAUTION
        return RiskLevel.SAFE
