"""
Services

Session orchestration around the decision engine.
"""
from .session import AnalysisSession, WizardStep

__all__ = ["AnalysisSession", "WizardStep"]
