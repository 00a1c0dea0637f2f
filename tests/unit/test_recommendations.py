"""
Unit Tests for Risk Classification and Recommendations
"""
import pytest
from typing import Dict

from skincheck.core.catalog import METRIC_KEYS
from skincheck.core.recommendations import (
    RecommendationEngine, RecommendationKind, PairwiseRule, PAIRWISE_RULES,
    PROFESSIONAL_REFERRAL, SINGLE_METRIC_ACTIONS, LIFESTYLE_TIPS,
    GENERIC_ACTION, GENERIC_TIP, rank_metrics,
)
from skincheck.core.risk import RiskClassifier, RiskLevel


def make_scores(default: int = 80, **overrides) -> Dict[str, int]:
    scores = {key: default for key in METRIC_KEYS}
    scores.update(overrides)
    return scores


@pytest.fixture
def classifier() -> RiskClassifier:
    return RiskClassifier()


@pytest.fixture
def engine() -> RecommendationEngine:
    return RecommendationEngine()


class TestRiskLevel:
    """Tests for RiskLevel ordering."""

    def test_ordered_by_severity(self):
        assert RiskLevel.SAFE < RiskLevel.CAUTION < RiskLevel.WARNING
        assert RiskLevel.WARNING > RiskLevel.SAFE
        assert RiskLevel.CAUTION >= RiskLevel.CAUTION
        assert max([RiskLevel.CAUTION, RiskLevel.WARNING, RiskLevel.SAFE]) == RiskLevel.WARNING

    def test_values(self):
        assert RiskLevel.WARNING.value == "warning"
        assert RiskLevel("caution") is RiskLevel.CAUTION


class TestRiskClassifier:
    """Tests for RiskClassifier precedence."""

    def test_empty_answers_are_safe(self, classifier):
        assert classifier.classify({}) == RiskLevel.SAFE

    def test_neutral_answers_are_safe(self, classifier):
        assert classifier.classify({1: "low_risk", 2: "clean", 3: "oily"}) == RiskLevel.SAFE

    def test_high_risk_lesion_is_warning(self, classifier):
        assert classifier.classify({1: "high_risk"}) == RiskLevel.WARNING

    def test_inflammation_is_warning(self, classifier):
        assert classifier.classify({2: "inflammation"}) == RiskLevel.WARNING

    def test_medium_risk_lesion_is_caution(self, classifier):
        assert classifier.classify({1: "medium_risk"}) == RiskLevel.CAUTION

    def test_sensitive_is_caution(self, classifier):
        assert classifier.classify({2: "sensitive"}) == RiskLevel.CAUTION

    def test_warning_dominates_caution(self, classifier):
        assert classifier.classify({1: "high_risk", 2: "sensitive"}) == RiskLevel.WARNING
        assert classifier.classify({1: "medium_risk", 2: "inflammation"}) == RiskLevel.WARNING

    def test_skin_type_does_not_affect_risk(self, classifier):
        assert classifier.classify({3: "dry", 4: "burns"}) == RiskLevel.SAFE


class TestRankMetrics:
    """Tests for worst-metric ordering."""

    def test_ascending_by_score(self):
        ranked = rank_metrics(make_scores(pores=40, pigment=50))
        assert ranked[:2] == ["pores", "pigment"]

    def test_ties_follow_catalog_order(self):
        scores = make_scores(pores=50, barrier=50)
        for _ in range(5):
            assert rank_metrics(scores)[:2] == ["barrier", "pores"]

    def test_tie_order_ignores_mapping_order(self):
        scores = {"pores": 50, "texture": 90, "barrier": 50}
        assert rank_metrics(scores)[:2] == ["barrier", "pores"]


class TestPairwiseRule:
    """Each rule in isolation."""

    @pytest.mark.parametrize("rule", PAIRWISE_RULES)
    def test_fires_only_when_both_below_threshold(self, rule):
        below = rule.threshold - 1
        assert rule.matches(make_scores(**{rule.first: below, rule.second: below}))
        assert not rule.matches(make_scores(**{rule.first: below, rule.second: rule.threshold}))
        assert not rule.matches(make_scores(**{rule.first: rule.threshold, rule.second: below}))

    def test_missing_metric_never_matches(self):
        rule = PAIRWISE_RULES[0]
        assert not rule.matches({rule.first: 10})

    def test_rule_priority_order(self):
        pairs = [(r.first, r.second) for r in PAIRWISE_RULES]
        assert pairs == [
            ("barrier", "redness"),
            ("hydration", "barrier"),
            ("sebum", "pores"),
            ("texture", "pores"),
            ("pigment", "texture"),
            ("hydration", "sebum"),
        ]
        thresholds = {(r.first, r.second): r.threshold for r in PAIRWISE_RULES}
        assert thresholds[("pigment", "texture")] == 65
        assert all(t == 60 for pair, t in thresholds.items() if pair != ("pigment", "texture"))


class TestRecommendationEngine:
    """Tests for RecommendationEngine."""

    def test_fallback_with_tip(self, engine):
        # baseline-like vector: no pair fires, pores lowest, pigment second
        scores = {"hydration": 72, "barrier": 75, "texture": 70, "pigment": 68,
                  "redness": 78, "sebum": 74, "pores": 66}
        recs = engine.recommend(scores, RiskLevel.SAFE)
        assert recs == [SINGLE_METRIC_ACTIONS["pores"], LIFESTYLE_TIPS["pigment"]]

    def test_fallback_without_tip_when_second_is_healthy(self, engine):
        recs = engine.recommend(make_scores(pores=50), RiskLevel.SAFE)
        assert recs == [SINGLE_METRIC_ACTIONS["pores"]]

    def test_tip_boundary_is_exclusive(self, engine):
        recs = engine.recommend(make_scores(pores=50, pigment=70), RiskLevel.SAFE)
        assert len(recs) == 1
        recs = engine.recommend(make_scores(pores=50, pigment=69), RiskLevel.SAFE)
        assert recs[-1] == LIFESTYLE_TIPS["pigment"]

    def test_first_matching_pair_wins(self, engine):
        scores = make_scores(barrier=50, redness=55, sebum=40, pores=45)
        recs = engine.recommend(scores, RiskLevel.SAFE)
        assert recs[0] == PAIRWISE_RULES[0].recommendation
        assert recs[0].kind == RecommendationKind.URGENT

    def test_sebum_pores_pair_keeps_duplicate_tip(self, engine):
        scores = make_scores(sebum=52, pores=52)
        recs = engine.recommend(scores, RiskLevel.SAFE)
        assert recs[0].title == "Balance oil and clear pores"
        assert recs[0].kind == RecommendationKind.CARE
        assert recs[1] == LIFESTYLE_TIPS["pores"]

    def test_pigment_texture_uses_higher_threshold(self, engine):
        recs = engine.recommend(make_scores(pigment=64, texture=64), RiskLevel.SAFE)
        assert recs[0].title == "Brighten and renew"
        # texture precedes pigment in the catalog, so pigment is second
        assert recs[1] == LIFESTYLE_TIPS["pigment"]

    def test_tied_worst_resolved_by_catalog_order(self, engine):
        recs = engine.recommend(make_scores(texture=50, barrier=50), RiskLevel.SAFE)
        assert recs == [SINGLE_METRIC_ACTIONS["barrier"], LIFESTYLE_TIPS["texture"]]

    def test_warning_prepends_critical(self, engine):
        recs = engine.recommend(make_scores(), RiskLevel.WARNING)
        assert recs[0] == PROFESSIONAL_REFERRAL
        assert recs[0].kind == RecommendationKind.CRITICAL
        assert recs[1] == SINGLE_METRIC_ACTIONS["hydration"]
        assert len(recs) == 2

    def test_warning_blocks_tip(self, engine):
        recs = engine.recommend(make_scores(pores=50, pigment=55), RiskLevel.WARNING)
        assert [r.kind for r in recs] == [RecommendationKind.CRITICAL, RecommendationKind.URGENT]

    def test_caution_adds_no_critical(self, engine):
        recs = engine.recommend(make_scores(pores=50), RiskLevel.CAUTION)
        assert all(r.kind != RecommendationKind.CRITICAL for r in recs)

    def test_unknown_metrics_use_generic_entries(self, engine):
        recs = engine.recommend({"glow": 30, "shine": 40}, RiskLevel.SAFE)
        assert recs == [GENERIC_ACTION, GENERIC_TIP]

    def test_never_empty(self, engine):
        for risk in RiskLevel:
            for value in (10, 50, 65, 95):
                assert engine.recommend(make_scores(default=value), risk)

    def test_empty_vector_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.recommend({}, RiskLevel.SAFE)

    def test_custom_rule_table(self):
        rule = PairwiseRule("hydration", "pores", 90, GENERIC_ACTION)
        custom = RecommendationEngine(pairwise_rules=(rule,))
        assert custom.recommend(make_scores(), RiskLevel.SAFE)[0] == GENERIC_ACTION

    def test_to_dict(self):
        d = PROFESSIONAL_REFERRAL.to_dict()
        assert d["kind"] == "critical"
        assert d["title"] == "See a dermatologist"
