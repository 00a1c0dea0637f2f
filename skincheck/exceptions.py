"""Exceptions raised at the session boundary."""


class SkinCheckError(Exception):
    """Base class for skincheck errors."""


class WizardStateError(SkinCheckError):
    """An operation was attempted from a step that does not allow it."""
    
    def __init__(self, operation: str, step: str):
        self.operation = operation
        self.step = step
        super().__init__(f"Cannot {operation} while in step '{step}'")


class InvalidAnswerError(SkinCheckError):
    """A tag outside the question's vocabulary was submitted."""
    
    def __init__(self, question_id: int, tag: str):
        self.question_id = question_id
        self.tag = tag
        super().__init__(f"Unknown answer {tag!r} for question {question_id}")
