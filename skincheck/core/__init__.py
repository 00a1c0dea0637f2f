"""
Core Decision Module

Metric catalog, scoring, risk classification, recommendations,
confidence estimation and radar geometry.
"""
from .catalog import METRIC_CATALOG, MetricDefinition
from .scoring import ScoreCalculator, IndexAggregator
from .risk import RiskClassifier, RiskLevel
from .recommendations import Recommendation, RecommendationEngine, RecommendationKind
from .confidence import CaptureAngle, ConfidenceEstimator
from .radar import RadarChart, RadarGeometry
from .engine import AnalysisResult, SkinAnalysisEngine

__all__ = [
    "METRIC_CATALOG",
    "MetricDefinition",
    "ScoreCalculator",
    "IndexAggregator",
    "RiskClassifier",
    "RiskLevel",
    "Recommendation",
    "RecommendationEngine",
    "RecommendationKind",
    "CaptureAngle",
    "ConfidenceEstimator",
    "RadarChart",
    "RadarGeometry",
    "AnalysisResult",
    "SkinAnalysisEngine",
]
