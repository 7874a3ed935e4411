# Data model for the question being composed in the admin form.
# quiz_admin/models/draft.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from quiz_admin.models.enums import QuestionType
from quiz_admin.models.question import (
    OPTION_COUNT,
    MultipleChoiceFields,
    NewQuestion,
    WrittenFields,
)
from quiz_admin.utils.config import settings


class DraftForm(BaseModel):
    """
    Unsaved question as typed into the admin form.

    Holds the fields of every question type at once so switching
    `question_type` does not lose what was already typed. Only the
    fields of the active type are persisted, see `project_draft`.
    """
    model_config = ConfigDict(validate_assignment=True)

    question: str = ""
    options: List[str] = Field(
        default_factory=lambda: [""] * OPTION_COUNT,
        min_length=OPTION_COUNT,
        max_length=OPTION_COUNT,
    )
    correct_answer: int = Field(0, ge=0, lt=OPTION_COUNT, description="Index of the correct option.")
    question_type: QuestionType = QuestionType.MULTIPLE_CHOICE
    written_answer: str = ""
    time_limit: int = Field(default_factory=lambda: settings.default_time_limit, gt=0)
    has_compiler: bool = False
    compiler_language: str = Field(default_factory=lambda: settings.default_compiler_language)


def project_draft(draft: DraftForm, created_by: str) -> NewQuestion:
    """
    Projects a draft onto the persisted shape of its question type.
    Raises pydantic.ValidationError if the result breaks a record invariant.
    """
    common = {
        "question": draft.question,
        "time_limit": draft.time_limit,
        "has_compiler": draft.has_compiler,
        "compiler_language": draft.compiler_language if draft.has_compiler else None,
        "created_by": created_by,
    }
    if draft.question_type == QuestionType.MULTIPLE_CHOICE:
        return MultipleChoiceFields(
            **common,
            options=list(draft.options),
            correct_answer=str(draft.correct_answer),
        )
    return WrittenFields(**common, options=[], correct_answer=draft.written_answer)
