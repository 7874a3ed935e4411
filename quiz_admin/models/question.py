# Data models for persisted quiz questions.
# A question is a tagged variant on `question_type`; each variant enforces its
# own shape when constructed.
# quiz_admin/models/question.py
from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

OPTION_COUNT = 4


class QuestionFields(BaseModel):
    """Fields shared by every question type."""
    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1)
    time_limit: int = Field(30, gt=0, description="Seconds allowed to answer.")
    has_compiler: bool = False
    compiler_language: Optional[str] = None
    created_by: str = ""

    @model_validator(mode="after")
    def check_compiler_language(self):
        if self.has_compiler and not self.compiler_language:
            raise ValueError("compiler_language is required when has_compiler is set")
        if not self.has_compiler and self.compiler_language is not None:
            raise ValueError("compiler_language must be null when has_compiler is not set")
        return self


class MultipleChoiceFields(QuestionFields):
    question_type: Literal["multiple_choice"] = "multiple_choice"
    options: List[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_answer: str = Field(description="Zero-based index into options, stored as text.")

    @field_validator("options")
    @classmethod
    def check_options(cls, v):
        if any(not option for option in v):
            raise ValueError("every option must be non-empty")
        return v

    @field_validator("correct_answer")
    @classmethod
    def check_correct_answer(cls, v):
        try:
            index = int(v)
        except ValueError:
            raise ValueError(f"correct_answer '{v}' is not an option index")
        if not 0 <= index < OPTION_COUNT:
            raise ValueError(f"correct_answer {index} is out of range")
        return v

    @property
    def correct_index(self) -> int:
        return int(self.correct_answer)


class WrittenFields(QuestionFields):
    question_type: Literal["written"] = "written"
    options: List[str] = Field(default_factory=list, max_length=0)
    correct_answer: str = Field(min_length=1, description="Expected free-text answer.")


class StoredFields(BaseModel):
    """Fields the store assigns on insert."""
    id: str
    created_at: datetime


class MultipleChoiceQuestion(MultipleChoiceFields, StoredFields):
    pass


class WrittenQuestion(WrittenFields, StoredFields):
    pass


# A question that has not been persisted yet.
NewQuestion = Annotated[
    Union[MultipleChoiceFields, WrittenFields],
    Field(discriminator="question_type"),
]

QuestionRecord = Annotated[
    Union[MultipleChoiceQuestion, WrittenQuestion],
    Field(discriminator="question_type"),
]

question_record_adapter = TypeAdapter(QuestionRecord)
