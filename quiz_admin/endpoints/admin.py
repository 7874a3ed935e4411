# Endpoints for the question administration page: list, add and delete questions.
# quiz_admin/endpoints/admin.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from quiz_admin.errors import DeleteError, InsertError, ValidationError
from quiz_admin.models.draft import DraftForm
from quiz_admin.models.enums import ControllerState, Surface
from quiz_admin.models.notification import Notification
from quiz_admin.models.question import QuestionRecord
from quiz_admin.services.admin_controller import AdminSessionController
from quiz_admin.services.collaborators import RecordingNavigator, RecordingNotifier, SessionContext
from quiz_admin.services.store_gateway import StoreGateway, get_gateway
from quiz_admin.utils.logger import logger

router = APIRouter()

class AdminPageResponse(BaseModel):
    state: ControllerState
    questions: List[QuestionRecord] = []
    draft: Optional[DraftForm] = None
    notifications: List[Notification] = []
    redirect_to: Optional[str] = None

class AdminSession:
    """A controller plus the sinks that collect its side effects for one request."""
    def __init__(self, actor_id: Optional[str], gateway: StoreGateway):
        self.notifier = RecordingNotifier()
        self.navigator = RecordingNavigator()
        self.controller = AdminSessionController(
            SessionContext(actor_id=actor_id), gateway, self.notifier, self.navigator
        )

    def response(self, status_code: int = 200) -> JSONResponse:
        controller = self.controller
        redirect = self.navigator.last_redirect
        if controller.state is ControllerState.DENIED:
            status_code = 401 if redirect is Surface.LOGIN else 403
        page = AdminPageResponse(
            state=controller.state,
            questions=controller.questions,
            draft=controller.draft if controller.state is ControllerState.READY else None,
            notifications=self.notifier.notifications,
            redirect_to=redirect.value if redirect else None,
        )
        return JSONResponse(status_code=status_code, content=page.model_dump(mode="json"))

async def get_admin_session(
    x_user_id: Optional[str] = Header(None),
    gateway: StoreGateway = Depends(get_gateway),
) -> AdminSession:
    session = AdminSession(x_user_id, gateway)
    await session.controller.start()
    return session

@router.get("/", response_model=AdminPageResponse)
async def list_questions(session: AdminSession = Depends(get_admin_session)):
    return session.response()

@router.post("/", response_model=AdminPageResponse, status_code=201)
async def add_question(draft: DraftForm, session: AdminSession = Depends(get_admin_session)):
    controller = session.controller
    if controller.state is not ControllerState.READY:
        return session.response()

    if await controller.submit(draft):
        return session.response(201)

    error = controller.last_error
    if isinstance(error, ValidationError):
        return session.response(422)
    if isinstance(error, InsertError):
        return session.response(502)
    logger.error(f"Unexpected submit failure: {error}")
    return session.response(500)

@router.delete("/{question_id}", response_model=AdminPageResponse)
async def delete_question(question_id: str, session: AdminSession = Depends(get_admin_session)):
    controller = session.controller
    if controller.state is not ControllerState.READY:
        return session.response()

    if await controller.delete(question_id):
        return session.response()

    error = controller.last_error
    if isinstance(error, DeleteError) and error.not_found:
        return session.response(404)
    return session.response(502)
