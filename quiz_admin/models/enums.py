# quiz_admin/models/enums.py
from enum import Enum

class QuestionType(str, Enum):
    """Discriminates the shape of a question's options and correct answer."""
    MULTIPLE_CHOICE = "multiple_choice"
    WRITTEN = "written"

class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"

class ValidationErrorKind(str, Enum):
    """Reasons a draft question is rejected before it reaches the store."""
    EMPTY_QUESTION = "empty_question"
    INCOMPLETE_OPTIONS = "incomplete_options"
    MISSING_WRITTEN_ANSWER = "missing_written_answer"

class AccessDenialReason(str, Enum):
    NO_ACTOR = "no_actor"
    NOT_ADMIN = "not_admin"
    ROLE_CHECK_FAILED = "role_check_failed"

class ControllerState(str, Enum):
    LOADING = "loading"
    DENIED = "denied"
    READY = "ready"

class Severity(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"

class Surface(str, Enum):
    """Named pages the navigation sink can redirect to."""
    LOGIN = "/auth"
    HOME = "/"
