# Orchestrates one admin session: access check, question list, draft form,
# and the submit/delete actions.
# quiz_admin/services/admin_controller.py
from typing import List, Optional

from quiz_admin.errors import AccessError, DeleteError, FetchError, InsertError, QuizAdminError, ValidationError
from quiz_admin.models.draft import DraftForm
from quiz_admin.models.enums import ControllerState, Severity
from quiz_admin.models.notification import Notification
from quiz_admin.models.question import QuestionRecord
from quiz_admin.services.access_guard import check_access
from quiz_admin.services.collaborators import Navigator, Notifier, SessionContext
from quiz_admin.services.store_gateway import StoreGateway
from quiz_admin.services.validation import VALIDATION_MESSAGES, validate
from quiz_admin.utils.logger import logger


def _error(description: str) -> Notification:
    return Notification(title="Error", description=description, severity=Severity.DESTRUCTIVE)


class AdminSessionController:
    """
    Owns the draft and the visible question list of one admin session.

    The list is only ever replaced by a successful `list_questions()`;
    mutations never edit it locally.
    """

    def __init__(
        self,
        context: SessionContext,
        gateway: StoreGateway,
        notifier: Notifier,
        navigator: Navigator,
    ):
        self.context = context
        self.gateway = gateway
        self.notifier = notifier
        self.navigator = navigator
        self.state = ControllerState.LOADING
        self.draft = DraftForm()
        self.questions: List[QuestionRecord] = []
        self.last_error: Optional[QuizAdminError] = None

    async def start(self) -> ControllerState:
        """Runs the access guard once, then loads the question list."""
        if self.state is not ControllerState.LOADING:
            return self.state

        result = await check_access(self.context, self.gateway, self.notifier, self.navigator)
        if not result.granted:
            self.state = ControllerState.DENIED
            self.last_error = AccessError(result.reason)
            return self.state

        self.state = ControllerState.READY
        await self.refresh()
        return self.state

    def _require_ready(self):
        if self.state is not ControllerState.READY:
            raise AccessError()

    async def refresh(self) -> bool:
        self._require_ready()
        try:
            self.questions = await self.gateway.list_questions()
        except FetchError as e:
            logger.error(f"Error fetching questions: {e}")
            self.last_error = e
            self.notifier.notify(_error("Failed to fetch existing questions"))
            return False
        return True

    def update_draft(self, **changes) -> DraftForm:
        """Applies field edits to the draft; rejected values raise pydantic.ValidationError."""
        self._require_ready()
        updated = self.draft.model_copy(deep=True)
        for name, value in changes.items():
            setattr(updated, name, value)
        self.draft = updated
        return self.draft

    def reset_draft(self) -> DraftForm:
        self.draft = DraftForm()
        return self.draft

    async def submit(self, draft: Optional[DraftForm] = None) -> bool:
        """
        Validates and stores the draft. On success the draft is reset and
        the list re-fetched; on any failure the draft is kept for a retry.
        """
        self._require_ready()
        if draft is not None:
            self.draft = draft

        result = validate(self.draft)
        if not result.ok:
            logger.info(f"Draft rejected: {result.error.value}")
            self.last_error = ValidationError(result.error)
            self.notifier.notify(_error(VALIDATION_MESSAGES[result.error]))
            return False

        try:
            await self.gateway.insert_question(self.draft, created_by=self.context.actor_id or "")
        except InsertError as e:
            logger.error(f"Error adding question: {e}")
            self.last_error = e
            self.notifier.notify(_error("Failed to add question. Please try again."))
            return False

        self.last_error = None
        self.notifier.notify(Notification(title="Success!", description="Question added successfully"))
        self.reset_draft()
        await self.refresh()
        return True

    async def delete(self, question_id: str) -> bool:
        self._require_ready()
        try:
            await self.gateway.delete_question(question_id)
        except DeleteError as e:
            logger.error(f"Error deleting question: {e}")
            self.last_error = e
            self.notifier.notify(_error("Failed to delete question"))
            return False

        self.last_error = None
        self.notifier.notify(Notification(title="Success", description="Question deleted successfully"))
        await self.refresh()
        return True
