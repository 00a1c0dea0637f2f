"""
Scoring Module

Derives the per-metric score vector from quiz answers and reduces it to
a single weighted health index.
"""
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple
import numpy as np

from skincheck.core.catalog import METRIC_CATALOG, BASELINE_SCORES, MetricDefinition
from skincheck.core import questions as q
from skincheck.utils import get_logger

logger = get_logger(__name__)

# question id -> selected answer tag
AnswerSet = Mapping[int, str]
# metric key -> clamped integer score
ScoreVector = Mapping[str, int]

SCORE_MIN = 10
SCORE_MAX = 95

Adjustment = Tuple[str, int]

ANSWER_DELTAS: Mapping[Tuple[int, str], Tuple[Adjustment, ...]] = MappingProxyType({
    (q.QuestionId.LESION_CHANGE, q.MEDIUM_RISK): (("pigment", -6),),
    (q.QuestionId.LESION_CHANGE, q.HIGH_RISK): (("pigment", -15), ("texture", -5)),
    (q.QuestionId.SYMPTOM, q.SENSITIVE): (("redness", -18), ("barrier", -12)),
    (q.QuestionId.SYMPTOM, q.INFLAMMATION): (("redness", -30), ("barrier", -20), ("texture", -8)),
    (q.QuestionId.SKIN_TYPE, q.DRY): (("hydration", -25), ("barrier", -15), ("texture", -12)),
    (q.QuestionId.SKIN_TYPE, q.COMBINATION): (("sebum", -8), ("pores", -6), ("hydration", -6)),
    (q.QuestionId.SKIN_TYPE, q.OILY): (("sebum", -22), ("pores", -14)),
    (q.QuestionId.SUN_REACTION, q.BURNS): (("redness", -8),),
    (q.QuestionId.SUN_REACTION, q.TANS): (("pigment", -10),),
    (q.QuestionId.SUN_REACTION, q.MIXED): (("pigment", -5), ("redness", -4)),
})


class ScoreCalculator:
    """
    Builds a ScoreVector from a fixed baseline plus answer-driven deltas.

    Deltas are additive across questions. Answers with no declared delta
    (including unknown tags and unanswered questions) leave the baseline
    untouched.
    """

    def __init__(
        self,
        baseline: Optional[Mapping[str, int]] = None,
        deltas: Optional[Mapping[Tuple[int, str], Tuple[Adjustment, ...]]] = None,
        catalog: Tuple[MetricDefinition, ...] = METRIC_CATALOG,
    ):
        self._baseline = baseline if baseline is not None else BASELINE_SCORES
        self._deltas = deltas if deltas is not None else ANSWER_DELTAS
        self._catalog = catalog

    def adjustments_for(self, question_id: int, tag: str) -> Tuple[Adjustment, ...]:
        """Declared adjustments for one answer (empty when none apply)."""
        return self._deltas.get((question_id, tag), ())

    def calculate(self, answers: AnswerSet) -> ScoreVector:
        """
        Compute the clamped score vector for an answer set.

        Args:
            answers: Mapping of question id to answer tag, possibly partial

        Returns:
            Read-only mapping of metric key to score, in catalog order
        """
        raw: Dict[str, int] = {m.key: self._baseline[m.key] for m in self._catalog}

        for question_id, tag in answers.items():
            adjustments = self.adjustments_for(question_id, tag)
            if not adjustments:
                logger.debug(f"No score contribution for answer {question_id}={tag!r}")
                continue
            for metric_key, delta in adjustments:
                if metric_key in raw:
                    raw[metric_key] += delta

        clamped = {
            key: int(np.clip(value, SCORE_MIN, SCORE_MAX))
            for key, value in raw.items()
        }
        return MappingProxyType(clamped)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class IndexAggregator:
    """Reduces a ScoreVector to one weighted health index (0-100)."""

    def __init__(self, catalog: Tuple[MetricDefinition, ...] = METRIC_CATALOG):
        self._catalog = catalog

    def weighted_sum(self, scores: ScoreVector) -> float:
        return float(sum(scores[m.key] * m.weight for m in self._catalog))

    def aggregate(self, scores: ScoreVector) -> int:
        """Compute round(Σ score * weight) over every catalog metric."""
        index = round_half_up(self.weighted_sum(scores))
        return int(np.clip(index, 0, 100))
