# tests/test_store_gateway.py
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy import insert
from sqlalchemy.exc import OperationalError

from quiz_admin.errors import DeleteError, FetchError, InsertError
from quiz_admin.models.draft import DraftForm
from quiz_admin.models.question import MultipleChoiceQuestion, WrittenQuestion
from quiz_admin.models.quiz_question import QuizQuestion
from quiz_admin.services.store_gateway import StoreGateway
from quiz_admin.utils.db import AsyncSessionLocal

from conftest import ADMIN_ID, PLAIN_USER_ID, run


async def _insert_rows(*rows):
    async with AsyncSessionLocal() as session:
        for row in rows:
            await session.execute(insert(QuizQuestion.__table__).values(**row))
        await session.commit()


def _row(question_id, created_at, **overrides):
    row = {
        "id": question_id,
        "question": f"Question {question_id}",
        "question_type": "multiple_choice",
        "options": ["A", "B", "C", "D"],
        "correct_answer": "0",
        "time_limit": 30,
        "has_compiler": False,
        "compiler_language": None,
        "created_by": ADMIN_ID,
        "created_at": created_at,
    }
    row.update(overrides)
    return row


def _broken_session_factory():
    """A session factory whose sessions fail on every statement."""
    session = MagicMock()
    session.__aenter__.side_effect = OperationalError("SELECT 1", {}, Exception("database is locked"))
    return MagicMock(return_value=session)


@pytest.mark.gateway
class TestListQuestions:
    def test_empty_store(self, gateway):
        assert run(gateway.list_questions()) == []

    def test_newest_first(self, gateway):
        base = datetime(2024, 5, 1, 9, 0, 0)
        run(_insert_rows(
            _row("old", base),
            _row("newest", base + timedelta(hours=2)),
            _row("middle", base + timedelta(hours=1)),
        ))
        records = run(gateway.list_questions())
        assert [r.id for r in records] == ["newest", "middle", "old"]

    def test_fills_defaults_for_missing_columns(self, gateway):
        run(_insert_rows(_row("legacy", datetime(2024, 1, 1), question_type=None, time_limit=None, has_compiler=None)))
        [record] = run(gateway.list_questions())
        assert isinstance(record, MultipleChoiceQuestion)
        assert record.time_limit == 30
        assert record.has_compiler is False
        assert record.compiler_language is None

    def test_skips_malformed_rows(self, gateway):
        run(_insert_rows(
            _row("good", datetime(2024, 1, 1)),
            _row("three-options", datetime(2024, 1, 2), options=["A", "B", "C"]),
        ))
        records = run(gateway.list_questions())
        assert [r.id for r in records] == ["good"]

    def test_store_failure_raises_fetch_error(self):
        broken = StoreGateway(_broken_session_factory())
        with pytest.raises(FetchError):
            run(broken.list_questions())


@pytest.mark.gateway
class TestInsertQuestion:
    def test_multiple_choice_round_trip(self, gateway, mc_draft):
        created = run(gateway.insert_question(mc_draft, created_by=ADMIN_ID))
        assert created.id
        assert created.correct_answer == "2"
        assert created.created_at is not None

        [listed] = run(gateway.list_questions())
        assert isinstance(listed, MultipleChoiceQuestion)
        assert listed.id == created.id
        assert listed.question_type == "multiple_choice"
        assert listed.options == ["A", "B", "C", "D"]
        assert listed.correct_answer == "2"
        assert listed.created_by == ADMIN_ID

    def test_written_round_trip(self, gateway, written_draft):
        written_draft.options = ["stale", "mc", "options", "here"]
        run(gateway.insert_question(written_draft, created_by=ADMIN_ID))
        [listed] = run(gateway.list_questions())
        assert isinstance(listed, WrittenQuestion)
        assert listed.options == []
        assert listed.correct_answer == "def"

    def test_compiler_off_persists_null_language(self, gateway, mc_draft):
        mc_draft.has_compiler = True
        mc_draft.compiler_language = "python"
        mc_draft.has_compiler = False
        run(gateway.insert_question(mc_draft))
        [listed] = run(gateway.list_questions())
        assert listed.has_compiler is False
        assert listed.compiler_language is None

    def test_compiler_on_persists_language(self, gateway, written_draft):
        written_draft.has_compiler = True
        written_draft.compiler_language = "python"
        run(gateway.insert_question(written_draft, created_by=ADMIN_ID))
        [listed] = run(gateway.list_questions())
        assert listed.has_compiler is True
        assert listed.compiler_language == "python"

    def test_missing_creator_is_empty_string(self, gateway, mc_draft):
        created = run(gateway.insert_question(mc_draft))
        assert created.created_by == ""

    def test_constraint_violation_raises_insert_error(self, gateway, mc_draft):
        mc_draft.has_compiler = True
        mc_draft.compiler_language = ""
        with pytest.raises(InsertError):
            run(gateway.insert_question(mc_draft))
        assert run(gateway.list_questions()) == []

    def test_incomplete_draft_raises_insert_error(self, gateway):
        with pytest.raises(InsertError):
            run(gateway.insert_question(DraftForm(question="Pick one")))

    def test_store_failure_raises_insert_error(self, mc_draft):
        broken = StoreGateway(_broken_session_factory())
        with pytest.raises(InsertError):
            run(broken.insert_question(mc_draft))


@pytest.mark.gateway
class TestDeleteQuestion:
    def test_delete_existing(self, gateway, mc_draft, written_draft):
        kept = run(gateway.insert_question(written_draft))
        removed = run(gateway.insert_question(mc_draft))
        run(gateway.delete_question(removed.id))
        assert [r.id for r in run(gateway.list_questions())] == [kept.id]

    def test_delete_unknown_id(self, gateway, mc_draft):
        created = run(gateway.insert_question(mc_draft))
        with pytest.raises(DeleteError) as exc_info:
            run(gateway.delete_question("no-such-question"))
        assert exc_info.value.not_found is True
        assert [r.id for r in run(gateway.list_questions())] == [created.id]

    def test_store_failure_raises_delete_error(self):
        broken = StoreGateway(_broken_session_factory())
        with pytest.raises(DeleteError) as exc_info:
            run(broken.delete_question("q-1"))
        assert exc_info.value.not_found is False


@pytest.mark.gateway
class TestIsAdmin:
    def test_roles(self, gateway):
        assert run(gateway.is_admin(ADMIN_ID)) is True
        assert run(gateway.is_admin(PLAIN_USER_ID)) is False
        assert run(gateway.is_admin("stranger")) is False
