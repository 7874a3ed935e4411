# Contracts for the collaborators the admin engine talks to: the session
# (who is acting), the notification sink and the navigation sink.
# quiz_admin/services/collaborators.py
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from quiz_admin.models.enums import Surface
from quiz_admin.models.notification import Notification
from quiz_admin.utils.logger import logger


@dataclass
class SessionContext:
    """The authenticated actor for one admin session, if any."""
    actor_id: Optional[str] = None


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class Navigator(Protocol):
    def redirect(self, surface: Surface) -> None: ...


@dataclass
class RecordingNotifier:
    """Keeps every notification so the caller can hand them to the user."""
    notifications: List[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        logger.debug(f"Notification [{notification.severity.value}] {notification.title}: {notification.description}")
        self.notifications.append(notification)


@dataclass
class RecordingNavigator:
    redirects: List[Surface] = field(default_factory=list)

    def redirect(self, surface: Surface) -> None:
        logger.debug(f"Redirecting to {surface.value}")
        self.redirects.append(surface)

    @property
    def last_redirect(self) -> Optional[Surface]:
        return self.redirects[-1] if self.redirects else None
