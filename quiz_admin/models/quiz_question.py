# quiz_admin/models/quiz_question.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON, CheckConstraint
from quiz_admin.models.user import Base


def _new_question_id() -> str:
    return str(uuid.uuid4())


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"
    __table_args__ = (
        CheckConstraint("time_limit > 0", name="ck_quiz_questions_time_limit_positive"),
        CheckConstraint(
            "question_type IN ('multiple_choice', 'written')",
            name="ck_quiz_questions_question_type",
        ),
        # No orphaned language selection
        CheckConstraint(
            "(has_compiler AND compiler_language IS NOT NULL) "
            "OR (NOT has_compiler AND compiler_language IS NULL)",
            name="ck_quiz_questions_compiler_language",
        ),
    )

    id = Column(String(36), primary_key=True, default=_new_question_id)
    question = Column(Text, nullable=False)
    question_type = Column(String, nullable=True, default="multiple_choice")
    options = Column(JSON, nullable=True, default=list)
    correct_answer = Column(Text, nullable=False)
    time_limit = Column(Integer, nullable=True, default=30)
    has_compiler = Column(Boolean, nullable=True, default=False)
    compiler_language = Column(String, nullable=True)
    created_by = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
