# The only path between the admin engine and the question store.
# Every call is a single round trip in its own session; failures are raised, not retried.
# quiz_admin/services/store_gateway.py
from typing import List, Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from quiz_admin.errors import DeleteError, FetchError, InsertError
from quiz_admin.models.draft import DraftForm, project_draft
from quiz_admin.models.enums import QuestionType, UserRole
from quiz_admin.models.question import QuestionRecord, question_record_adapter
from quiz_admin.models.quiz_question import QuizQuestion
from quiz_admin.models.user import User
from quiz_admin.utils.config import settings
from quiz_admin.utils.db import AsyncSessionLocal
from quiz_admin.utils.logger import logger


def row_to_record(row: QuizQuestion) -> QuestionRecord:
    """
    Builds the typed record for a stored row, filling the defaults for
    columns older rows may lack. Raises pydantic.ValidationError if the
    row still breaks a record invariant.
    """
    question_type = row.question_type or QuestionType.MULTIPLE_CHOICE.value
    has_compiler = bool(row.has_compiler)
    compiler_language = None
    if has_compiler:
        compiler_language = row.compiler_language or settings.default_compiler_language

    return question_record_adapter.validate_python({
        "id": row.id,
        "question": row.question,
        "question_type": question_type,
        "options": list(row.options or []),
        "correct_answer": row.correct_answer,
        "time_limit": row.time_limit or settings.default_time_limit,
        "has_compiler": has_compiler,
        "compiler_language": compiler_language,
        "created_by": row.created_by or "",
        "created_at": row.created_at,
    })


class StoreGateway:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def list_questions(self) -> List[QuestionRecord]:
        """Returns every stored question, newest first."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(QuizQuestion).order_by(QuizQuestion.created_at.desc())
                )
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.exception(f"Error fetching questions: {e}")
            raise FetchError("Failed to fetch questions") from e

        records = []
        for row in rows:
            try:
                records.append(row_to_record(row))
            except SchemaValidationError as ve:
                logger.warning(f"Skipping malformed question {row.id}: {ve.error_count()} invalid field(s)")
        logger.debug(f"Fetched {len(records)} of {len(rows)} stored questions.")
        return records

    async def insert_question(self, draft: DraftForm, created_by: str = "") -> QuestionRecord:
        """Persists the active fields of a draft and returns the stored record."""
        try:
            new_question = project_draft(draft, created_by)
        except SchemaValidationError as ve:
            logger.error(f"Draft violates question constraints: {ve}")
            raise InsertError("Question violates record constraints") from ve

        row = QuizQuestion(**new_question.model_dump())
        try:
            async with self.session_factory() as session:
                session.add(row)
                await session.commit()
                await session.refresh(row)
        except SQLAlchemyError as e:
            logger.exception(f"Error adding question: {e}")
            raise InsertError("Failed to add question") from e

        logger.info(f"Added {row.question_type} question {row.id} (created_by='{created_by}').")
        return row_to_record(row)

    async def delete_question(self, question_id: str) -> None:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    delete(QuizQuestion).where(QuizQuestion.id == question_id)
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Error deleting question {question_id}: {e}")
            raise DeleteError(question_id) from e

        if result.rowcount == 0:
            logger.warning(f"Delete requested for unknown question {question_id}")
            raise DeleteError(question_id, not_found=True)
        logger.info(f"Deleted question {question_id}.")

    async def is_admin(self, actor_id: str) -> bool:
        """Role predicate for the access guard. Store errors propagate."""
        async with self.session_factory() as session:
            result = await session.execute(select(User.role).where(User.id == actor_id))
            role: Optional[str] = result.scalars().first()
        return role == UserRole.ADMIN.value


# Instantiate the gateway globally or manage via dependency injection
store_gateway = StoreGateway()

def get_gateway() -> StoreGateway:
    """FastAPI dependency returning the shared gateway."""
    return store_gateway
