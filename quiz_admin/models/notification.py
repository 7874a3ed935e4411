# Data model for user-facing notifications (toast title, description, severity)
# quiz_admin/models/notification.py
from pydantic import BaseModel
from quiz_admin.models.enums import Severity

class Notification(BaseModel):
    title: str
    description: str
    severity: Severity = Severity.DEFAULT
