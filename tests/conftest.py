# tests/conftest.py
import asyncio
import logging
import os
import sys
import tempfile

import pytest
from fastapi.testclient import TestClient

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- Point the app at a throwaway SQLite database before anything imports settings ---
TEST_DB_DIR = tempfile.mkdtemp(prefix="quiz_admin_tests_")
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{os.path.join(TEST_DB_DIR, 'test_quiz_admin.db')}"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quiz_admin.models.draft import DraftForm
from quiz_admin.services.collaborators import RecordingNavigator, RecordingNotifier, SessionContext
from quiz_admin.services.store_gateway import StoreGateway
from quiz_admin.state_manager import set_admin_role
from quiz_admin.utils.config import settings
from quiz_admin.utils.db import create_tables, drop_tables

ADMIN_ID = "admin-1"
PLAIN_USER_ID = "player-1"


def run(coro):
    """Drives a coroutine to completion from a synchronous test."""
    return asyncio.run(coro)


@pytest.fixture(scope="session", autouse=True)
def check_test_database():
    if settings.database_url != TEST_DATABASE_URL:
        pytest.fail(f"Tests must run against {TEST_DATABASE_URL}, got {settings.database_url}")
    logger.info(f"Using test database: {TEST_DATABASE_URL}")
    yield


# --- Fresh tables for every test, with one admin and one plain user ---
@pytest.fixture(autouse=True)
def reset_database():
    async def _reset():
        await drop_tables()
        await create_tables()
        await set_admin_role(ADMIN_ID, True)
        await set_admin_role(PLAIN_USER_ID, False)

    run(_reset())
    yield


@pytest.fixture
def gateway() -> StoreGateway:
    return StoreGateway()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def admin_context() -> SessionContext:
    return SessionContext(actor_id=ADMIN_ID)


@pytest.fixture
def mc_draft() -> DraftForm:
    return DraftForm(
        question="Which option is the third letter?",
        options=["A", "B", "C", "D"],
        correct_answer=2,
    )


@pytest.fixture
def written_draft() -> DraftForm:
    return DraftForm(
        question="Name the keyword that defines a function in Python.",
        question_type="written",
        written_answer="def",
    )


# --- TestClient Fixture ---
@pytest.fixture
def client():
    from quiz_admin.main import app
    with TestClient(app) as c:
        yield c
