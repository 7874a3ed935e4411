# quiz_admin/errors.py
from quiz_admin.models.enums import AccessDenialReason, ValidationErrorKind


class QuizAdminError(Exception):
    """Base class for every error the admin engine raises or recovers from."""


class AccessError(QuizAdminError):
    """The current actor may not use the admin surface."""

    def __init__(self, reason: AccessDenialReason | None = None):
        self.reason = reason
        super().__init__(f"Access denied: {reason.value if reason else 'session is not ready'}")


class ValidationError(QuizAdminError):
    """A draft question is malformed. Never sent to the store."""

    def __init__(self, kind: ValidationErrorKind):
        self.kind = kind
        super().__init__(f"Invalid draft: {kind.value}")


class StoreError(QuizAdminError):
    """A round trip to the question store failed."""


class FetchError(StoreError):
    pass


class InsertError(StoreError):
    pass


class DeleteError(StoreError):
    def __init__(self, question_id: str, not_found: bool = False):
        self.question_id = question_id
        self.not_found = not_found
        detail = "does not exist" if not_found else "could not be deleted"
        super().__init__(f"Question '{question_id}' {detail}")
