"""
Analysis Session - headless wizard step machine

Collects answers and capture flags step by step and runs the engine
exactly once. Holds no presentation logic.
"""
from enum import Enum
from typing import Dict, Optional, Set

from skincheck.core.confidence import CaptureAngle
from skincheck.core.engine import AnalysisResult, SkinAnalysisEngine
from skincheck.core.questions import QUESTIONS, validate_answer
from skincheck.exceptions import InvalidAnswerError, WizardStateError
from skincheck.utils import get_logger

logger = get_logger(__name__)


class WizardStep(str, Enum):
    LANDING = "landing"
    QUIZ = "quiz"
    GUIDE = "guide"
    CAMERA = "camera"
    ANALYZING = "analyzing"
    RESULT = "result"


class AnalysisSession:
    """
    Linear flow: landing -> quiz -> guide -> camera -> analyzing -> result.

    Answering the last unanswered question advances to GUIDE. ``analyze``
    is allowed from GUIDE (no captures) or CAMERA.
    """

    def __init__(self, engine: Optional[SkinAnalysisEngine] = None):
        self.engine = engine or SkinAnalysisEngine()
        self.step = WizardStep.LANDING
        self.answers: Dict[int, str] = {}
        self.captures: Set[CaptureAngle] = set()
        self.result: Optional[AnalysisResult] = None

    def _require(self, operation: str, *allowed: WizardStep) -> None:
        if self.step not in allowed:
            raise WizardStateError(operation, self.step.value)

    def _transition(self, target: WizardStep) -> None:
        logger.debug(f"Session step {self.step.value} -> {target.value}")
        self.step = target

    @property
    def pending_questions(self):
        return [question.id for question in QUESTIONS if question.id not in self.answers]

    def start(self) -> None:
        self._require("start", WizardStep.LANDING)
        self._transition(WizardStep.QUIZ)

    def answer(self, question_id: int, tag: str) -> None:
        """Record an answer; re-answering a question overwrites it."""
        self._require("answer", WizardStep.QUIZ)
        if not validate_answer(question_id, tag):
            raise InvalidAnswerError(question_id, tag)
        self.answers[int(question_id)] = tag
        if not self.pending_questions:
            self._transition(WizardStep.GUIDE)

    def open_camera(self) -> None:
        self._require("open camera", WizardStep.GUIDE)
        self._transition(WizardStep.CAMERA)

    def capture(self, angle) -> None:
        self._require("capture", WizardStep.CAMERA)
        self.captures.add(CaptureAngle(angle))

    def analyze(self) -> AnalysisResult:
        """Run the engine on the current snapshot and move to RESULT."""
        self._require("analyze", WizardStep.GUIDE, WizardStep.CAMERA)
        self._transition(WizardStep.ANALYZING)
        self.result = self.engine.analyze(dict(self.answers), frozenset(self.captures))
        self._transition(WizardStep.RESULT)
        return self.result

    def reset(self) -> None:
        """Discard everything and return to LANDING."""
        self.answers = {}
        self.captures = set()
        self.result = None
        self._transition(WizardStep.LANDING)
