"""
Skin Analysis Engine

Facade that runs one analysis: scores, index, risk tier, confidence,
recommendations and skin type, combined into an immutable result.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from skincheck.core import questions as q
from skincheck.core.confidence import CaptureSet, ConfidenceEstimator, to_capture_set
from skincheck.core.recommendations import Recommendation, RecommendationEngine
from skincheck.core.risk import RiskClassifier, RiskLevel
from skincheck.core.scoring import AnswerSet, IndexAggregator, ScoreCalculator, ScoreVector
from skincheck.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SkinRoutine:
    """Ordered morning and evening care steps."""
    morning: Tuple[str, ...]
    evening: Tuple[str, ...]

    def to_dict(self) -> Dict[str, List[str]]:
        return {"morning": list(self.morning), "evening": list(self.evening)}


@dataclass(frozen=True)
class SkinTypeProfile:
    key: str
    label: str
    description: str
    routine: Optional[SkinRoutine] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "description": self.description,
            "routine": self.routine.to_dict() if self.routine else None,
        }


SKIN_TYPES: Mapping[str, SkinTypeProfile] = MappingProxyType({
    q.OILY: SkinTypeProfile(
        q.OILY, "Oily",
        "High oil output makes pore care the priority. Prefer light, "
        "gel-textured products.",
        SkinRoutine(
            morning=("Gel cleanser", "BHA toner", "Oil-free gel moisturizer", "Matte sunscreen"),
            evening=("Double cleanse", "Niacinamide serum", "Light gel cream"),
        ),
    ),
    q.DRY: SkinTypeProfile(
        q.DRY, "Dry",
        "Low moisture can reduce elasticity. Focus on rich, hydrating "
        "products.",
        SkinRoutine(
            morning=("Cream cleanser", "Hyaluronic acid toner", "Rich moisturizer", "Sunscreen"),
            evening=("Cleansing balm", "Ceramide serum", "Night cream"),
        ),
    ),
    q.COMBINATION: SkinTypeProfile(
        q.COMBINATION, "Combination",
        "Oily T-zone with drier cheeks. Care for each zone separately.",
        SkinRoutine(
            morning=("Low-pH cleanser", "Hyaluronic acid toner", "Moisture cream"),
            evening=("Double cleanse", "Soothing ampoule", "Night cream"),
        ),
    ),
})


def classify_skin_type(answers: AnswerSet) -> SkinTypeProfile:
    """Majority of oily vs dry tags; a tie or neither means combination."""
    tags = list(answers.values())
    oily = tags.count(q.OILY)
    dry = tags.count(q.DRY)
    if oily > dry:
        return SKIN_TYPES[q.OILY]
    if dry > oily:
        return SKIN_TYPES[q.DRY]
    return SKIN_TYPES[q.COMBINATION]


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run."""
    scores: ScoreVector
    index: int
    risk: RiskLevel
    confidence: int
    recommendations: Tuple[Recommendation, ...] = field(default_factory=tuple)
    skin_type: Optional[SkinTypeProfile] = None

    def __hash__(self) -> int:
        # scores is a read-only mapping, which is not hashable itself
        return hash((
            tuple(self.scores.items()),
            self.index,
            self.risk,
            self.confidence,
            self.recommendations,
            self.skin_type,
        ))

    @property
    def worst_metric(self) -> str:
        return min(self.scores, key=lambda k: self.scores[k])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "scores": dict(self.scores),
            "index": self.index,
            "risk": self.risk.value,
            "confidence": self.confidence,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "skin_type": self.skin_type.to_dict() if self.skin_type else None,
        }


class SkinAnalysisEngine:
    """
    Stateless decision engine.

    Collaborators are injectable for testing; defaults use the built-in
    tables. Safe to share across threads since nothing is mutated.
    """

    def __init__(
        self,
        calculator: Optional[ScoreCalculator] = None,
        aggregator: Optional[IndexAggregator] = None,
        classifier: Optional[RiskClassifier] = None,
        recommender: Optional[RecommendationEngine] = None,
        estimator: Optional[ConfidenceEstimator] = None,
    ):
        self.calculator = calculator or ScoreCalculator()
        self.aggregator = aggregator or IndexAggregator()
        self.classifier = classifier or RiskClassifier()
        self.recommender = recommender or RecommendationEngine()
        self.estimator = estimator or ConfidenceEstimator()

    def analyze(
        self,
        answers: Optional[AnswerSet] = None,
        captures: Optional[Iterable] = None,
    ) -> AnalysisResult:
        """
        Run one analysis over an answer/capture snapshot.

        Args:
            answers: Question id -> answer tag; partial or empty is fine
            captures: Captured angles (CaptureAngle members or their values)

        Returns:
            AnalysisResult
        """
        answers = dict(answers or {})
        capture_set: CaptureSet = to_capture_set(captures or ())

        scores = self.calculator.calculate(answers)
        index = self.aggregator.aggregate(scores)
        risk = self.classifier.classify(answers)
        recommendations = self.recommender.recommend(scores, risk)
        confidence = self.estimator.estimate(capture_set)

        result = AnalysisResult(
            scores=scores,
            index=index,
            risk=risk,
            confidence=confidence,
            recommendations=tuple(recommendations),
            skin_type=classify_skin_type(answers),
        )
        logger.info(
            f"Analysis complete: index={index} risk={risk.value} "
            f"confidence={confidence} recommendations={len(recommendations)}"
        )
        return result
