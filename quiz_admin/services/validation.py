# Type-dependent checks run on a draft before it is sent to the store.
# quiz_admin/services/validation.py
from dataclasses import dataclass
from typing import Optional

from quiz_admin.models.draft import DraftForm
from quiz_admin.models.enums import QuestionType, ValidationErrorKind


@dataclass(frozen=True)
class ValidationResult:
    error: Optional[ValidationErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


OK = ValidationResult()

# User-facing message for each rejection
VALIDATION_MESSAGES = {
    ValidationErrorKind.EMPTY_QUESTION: "Please fill in the question",
    ValidationErrorKind.INCOMPLETE_OPTIONS: "Please fill in all options",
    ValidationErrorKind.MISSING_WRITTEN_ANSWER: "Please provide the correct answer",
}


def validate(draft: DraftForm) -> ValidationResult:
    """Checks a draft in order; the first failing rule decides the result."""
    if not draft.question:
        return ValidationResult(ValidationErrorKind.EMPTY_QUESTION)

    if draft.question_type == QuestionType.MULTIPLE_CHOICE and any(not option for option in draft.options):
        return ValidationResult(ValidationErrorKind.INCOMPLETE_OPTIONS)

    if draft.question_type == QuestionType.WRITTEN and not draft.written_answer:
        return ValidationResult(ValidationErrorKind.MISSING_WRITTEN_ANSWER)

    return OK
