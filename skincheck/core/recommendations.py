"""
Recommendation Engine

Turns a score vector and a risk tier into a short, ordered list of care
actions. Rules are plain records evaluated top to bottom; the first
pairwise rule that matches wins.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from skincheck.core.catalog import METRIC_KEYS
from skincheck.core.risk import RiskLevel
from skincheck.core.scoring import ScoreVector
from skincheck.utils import get_logger

logger = get_logger(__name__)

TIP_THRESHOLD = 70


class RecommendationKind(str, Enum):
    """Recommendation severity, most severe first."""
    CRITICAL = "critical"
    URGENT = "urgent"
    CARE = "care"
    TIP = "tip"


@dataclass(frozen=True)
class Recommendation:
    kind: RecommendationKind
    title: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "title": self.title,
            "description": self.description,
        }


@dataclass(frozen=True)
class PairwiseRule:
    """Fires when both metrics score below the threshold."""
    first: str
    second: str
    threshold: int
    recommendation: Recommendation

    def matches(self, scores: ScoreVector) -> bool:
        first = scores.get(self.first)
        second = scores.get(self.second)
        if first is None or second is None:
            return False
        return first < self.threshold and second < self.threshold


PROFESSIONAL_REFERRAL = Recommendation(
    RecommendationKind.CRITICAL,
    "See a dermatologist",
    "Your answers point to a changing lesion or active inflammation. "
    "Book an in-person examination before starting any new treatment.",
)

PAIRWISE_RULES: Tuple[PairwiseRule, ...] = (
    PairwiseRule("barrier", "redness", 60, Recommendation(
        RecommendationKind.URGENT,
        "Calm and repair the barrier",
        "Redness and a weakened barrier together suggest irritation. Pause "
        "acids and retinoids and use a fragrance-free ceramide cream.",
    )),
    PairwiseRule("hydration", "barrier", 60, Recommendation(
        RecommendationKind.URGENT,
        "Intensive moisture care",
        "Skin is losing water faster than it holds it. Layer a humectant "
        "serum under an occlusive moisturizer morning and night.",
    )),
    PairwiseRule("sebum", "pores", 60, Recommendation(
        RecommendationKind.CARE,
        "Balance oil and clear pores",
        "Excess oil is congesting pores. Use a gentle BHA cleanser a few "
        "times a week and a light, non-comedogenic gel moisturizer.",
    )),
    PairwiseRule("texture", "pores", 60, Recommendation(
        RecommendationKind.CARE,
        "Smooth the surface",
        "Rough texture with visible pores responds to regular, mild "
        "exfoliation. Start with a low-strength AHA twice a week.",
    )),
    PairwiseRule("pigment", "texture", 65, Recommendation(
        RecommendationKind.CARE,
        "Brighten and renew",
        "Uneven tone and texture often improve together. Pair daily "
        "SPF 50 with a vitamin C serum in the morning.",
    )),
    PairwiseRule("hydration", "sebum", 60, Recommendation(
        RecommendationKind.CARE,
        "Restore oil and water balance",
        "Dehydrated skin can overproduce oil. Replace harsh cleansers with "
        "a low-pH one and add a lightweight hydrating toner.",
    )),
)

SINGLE_METRIC_ACTIONS: Mapping[str, Recommendation] = MappingProxyType({
    "hydration": Recommendation(
        RecommendationKind.URGENT,
        "Boost hydration",
        "Add a hyaluronic acid serum on damp skin and seal it with a "
        "moisturizer.",
    ),
    "barrier": Recommendation(
        RecommendationKind.URGENT,
        "Strengthen the barrier",
        "Simplify your routine to cleanser, ceramide moisturizer and "
        "sunscreen for two weeks.",
    ),
    "texture": Recommendation(
        RecommendationKind.URGENT,
        "Refine texture",
        "Introduce a gentle chemical exfoliant once or twice a week.",
    ),
    "pigment": Recommendation(
        RecommendationKind.URGENT,
        "Fade dark spots",
        "Wear broad-spectrum SPF every day and add niacinamide or "
        "vitamin C to your routine.",
    ),
    "redness": Recommendation(
        RecommendationKind.URGENT,
        "Soothe redness",
        "Choose products with centella or panthenol and avoid hot water "
        "when cleansing.",
    ),
    "sebum": Recommendation(
        RecommendationKind.URGENT,
        "Control excess oil",
        "Switch to oil-free, non-comedogenic products and blot rather "
        "than re-wash during the day.",
    ),
    "pores": Recommendation(
        RecommendationKind.URGENT,
        "Minimize pores",
        "Use a salicylic acid product to keep pores clear and never sleep "
        "in makeup.",
    ),
})

GENERIC_ACTION = Recommendation(
    RecommendationKind.URGENT,
    "Focus on your weakest area",
    "Keep a simple routine of gentle cleansing, moisturizer and daily "
    "sunscreen, and reassess in four weeks.",
)

LIFESTYLE_TIPS: Mapping[str, Recommendation] = MappingProxyType({
    "hydration": Recommendation(
        RecommendationKind.TIP,
        "Drink more water",
        "Aim for 1.5-2 liters a day and run a humidifier in dry rooms.",
    ),
    "barrier": Recommendation(
        RecommendationKind.TIP,
        "Shorter, cooler showers",
        "Hot water strips barrier lipids; keep showers lukewarm and brief.",
    ),
    "texture": Recommendation(
        RecommendationKind.TIP,
        "Prioritize sleep",
        "Seven to eight hours of sleep supports overnight skin renewal.",
    ),
    "pigment": Recommendation(
        RecommendationKind.TIP,
        "Reapply sunscreen",
        "Reapply every two hours outdoors, even on cloudy days.",
    ),
    "redness": Recommendation(
        RecommendationKind.TIP,
        "Watch your triggers",
        "Spicy food, alcohol and sudden temperature changes can worsen "
        "flushing.",
    ),
    "sebum": Recommendation(
        RecommendationKind.TIP,
        "Mind sugar intake",
        "High-glycemic diets are linked to higher oil production.",
    ),
    "pores": Recommendation(
        RecommendationKind.TIP,
        "Clean what touches your face",
        "Change pillowcases weekly and wipe your phone screen often.",
    ),
})

GENERIC_TIP = Recommendation(
    RecommendationKind.TIP,
    "Keep a steady routine",
    "Consistency matters more than the number of products.",
)


def rank_metrics(scores: ScoreVector, order: Tuple[str, ...] = METRIC_KEYS) -> List[str]:
    """
    Metric keys sorted ascending by score.

    Ties keep declaration order; keys present in the vector but absent
    from ``order`` sort after the declared ones.
    """
    declared = [k for k in order if k in scores]
    extra = [k for k in scores if k not in order]
    return sorted(declared + extra, key=lambda k: scores[k])


class RecommendationEngine:
    """
    Rule-based recommendation selection.

    Produces, in order: an optional critical referral, one pairwise or
    single-metric action, and an optional lifestyle tip.
    """

    def __init__(
        self,
        pairwise_rules: Tuple[PairwiseRule, ...] = PAIRWISE_RULES,
        single_actions: Mapping[str, Recommendation] = SINGLE_METRIC_ACTIONS,
        tips: Mapping[str, Recommendation] = LIFESTYLE_TIPS,
        tip_threshold: int = TIP_THRESHOLD,
    ):
        self._pairwise_rules = pairwise_rules
        self._single_actions = single_actions
        self._tips = tips
        self._tip_threshold = tip_threshold

    def match_pairwise(self, scores: ScoreVector) -> Optional[PairwiseRule]:
        """Return the first pairwise rule that fires, if any."""
        for rule in self._pairwise_rules:
            if rule.matches(scores):
                return rule
        return None

    def single_action(self, metric_key: str) -> Recommendation:
        action = self._single_actions.get(metric_key)
        if action is None:
            logger.warning(f"No single-metric action for '{metric_key}', using generic recommendation")
            return GENERIC_ACTION
        return action

    def lifestyle_tip(self, metric_key: str) -> Recommendation:
        tip = self._tips.get(metric_key)
        if tip is None:
            logger.warning(f"No lifestyle tip for '{metric_key}', using generic tip")
            return GENERIC_TIP
        return tip

    def recommend(self, scores: ScoreVector, risk: RiskLevel) -> List[Recommendation]:
        """
        Build the ordered recommendation list.

        Args:
            scores: Score vector for the run
            risk: Risk tier for the run

        Returns:
            Non-empty list, most severe first
        """
        if not scores:
            raise ValueError("Cannot recommend from an empty score vector")

        ranked = rank_metrics(scores)
        worst = ranked[0]
        second = ranked[1] if len(ranked) > 1 else None

        recommendations: List[Recommendation] = []

        if risk == RiskLevel.WARNING:
            recommendations.append(PROFESSIONAL_REFERRAL)

        rule = self.match_pairwise(scores)
        if rule is not None:
            logger.debug(f"Pairwise rule matched: {rule.first}/{rule.second}")
            recommendations.append(rule.recommendation)
        else:
            recommendations.append(self.single_action(worst))

        # may repeat a metric already covered by the pairwise rule
        if len(recommendations) < 2 and second is not None and scores[second] < self._tip_threshold:
            recommendations.append(self.lifestyle_tip(second))

        return recommendations
