"""
Quiz Questions

Closed answer vocabularies for each quiz question. The collaborator UI
renders prompts and option labels from here; the engine only consumes
the tags.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


class QuestionId(IntEnum):
    """Identifiers of the quiz questions."""
    LESION_CHANGE = 1
    SYMPTOM = 2
    SKIN_TYPE = 3
    SUN_REACTION = 4


# Lesion-change tags
LOW_RISK = "low_risk"
MEDIUM_RISK = "medium_risk"
HIGH_RISK = "high_risk"

# Symptom tags
CLEAN = "clean"
SENSITIVE = "sensitive"
INFLAMMATION = "inflammation"

# Skin-type tags
DRY = "dry"
COMBINATION = "combination"
OILY = "oily"

# Sun-reaction tags
BURNS = "burns"
TANS = "tans"
MIXED = "mixed"


@dataclass(frozen=True)
class AnswerOption:
    tag: str
    label: str


@dataclass(frozen=True)
class Question:
    """A quiz question and its answer options."""
    id: int
    prompt: str
    options: Tuple[AnswerOption, ...] = field(default_factory=tuple)

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(o.tag for o in self.options)

    def to_dict(self) -> Dict[str, object]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "prompt": self.prompt,
            "options": [{"tag": o.tag, "label": o.label} for o in self.options],
        }


QUESTIONS: Tuple[Question, ...] = (
    Question(
        QuestionId.LESION_CHANGE,
        "Has any mole or spot changed in size, shape or color recently?",
        (
            AnswerOption(LOW_RISK, "No changes that I have noticed"),
            AnswerOption(MEDIUM_RISK, "Slight change, or I am not sure"),
            AnswerOption(HIGH_RISK, "Yes, it grew, bled or changed color"),
        ),
    ),
    Question(
        QuestionId.SYMPTOM,
        "How does your skin usually feel after cleansing or new products?",
        (
            AnswerOption(CLEAN, "Comfortable, no reaction"),
            AnswerOption(SENSITIVE, "Stings or turns red easily"),
            AnswerOption(INFLAMMATION, "Frequent breakouts, itching or swelling"),
        ),
    ),
    Question(
        QuestionId.SKIN_TYPE,
        "How does your face feel a few hours after washing?",
        (
            AnswerOption(DRY, "Tight all over"),
            AnswerOption(COMBINATION, "Shiny only around the T-zone"),
            AnswerOption(OILY, "Shiny all over"),
        ),
    ),
    Question(
        QuestionId.SUN_REACTION,
        "How does your skin react to sun exposure?",
        (
            AnswerOption(BURNS, "Turns red easily"),
            AnswerOption(TANS, "Tans dark"),
            AnswerOption(MIXED, "Reddens first, then tans"),
        ),
    ),
)

QUESTIONS_BY_ID: Mapping[int, Question] = MappingProxyType({q.id: q for q in QUESTIONS})


def get_question(question_id: int) -> Optional[Question]:
    return QUESTIONS_BY_ID.get(question_id)


def validate_answer(question_id: int, tag: str) -> bool:
    """Check that a tag belongs to the question's vocabulary."""
    question = get_question(question_id)
    if question is None:
        return False
    return tag in question.tags
