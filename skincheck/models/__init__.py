from .analysis import AnalysisRequest, AnalysisResponse

__all__ = ["AnalysisRequest", "AnalysisResponse"]
