"""
Analysis Boundary Models
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Tuple

from skincheck.core.confidence import CaptureAngle, CaptureSet
from skincheck.core.engine import AnalysisResult


class AnalysisRequest(BaseModel):
    """Snapshot handed over by the wizard collaborator."""
    answers: Dict[int, str] = Field(default_factory=dict, description="Question id -> answer tag")
    captures: List[CaptureAngle] = Field(default_factory=list, description="Captured viewing angles")

    def to_inputs(self) -> Tuple[Dict[int, str], CaptureSet]:
        return dict(self.answers), frozenset(self.captures)


class RecommendationResponse(BaseModel):
    kind: str
    title: str
    description: str


class RoutineResponse(BaseModel):
    morning: List[str]
    evening: List[str]


class SkinTypeResponse(BaseModel):
    key: str
    label: str
    description: str
    routine: Optional[RoutineResponse] = None


class AnalysisResponse(BaseModel):
    """Result handed to the presentation collaborator."""
    scores: Dict[str, int]
    index: int = Field(..., ge=0, le=100)
    risk: str
    confidence: int
    recommendations: List[RecommendationResponse]
    skin_type: Optional[SkinTypeResponse] = None

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls.model_validate(result.to_dict())
