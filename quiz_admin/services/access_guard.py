# Decides whether the current actor may use the admin surface.
# quiz_admin/services/access_guard.py
from dataclasses import dataclass
from typing import Optional

from quiz_admin.models.enums import AccessDenialReason, Severity, Surface
from quiz_admin.models.notification import Notification
from quiz_admin.services.collaborators import Navigator, Notifier, SessionContext
from quiz_admin.services.store_gateway import StoreGateway
from quiz_admin.utils.logger import logger


@dataclass(frozen=True)
class AccessResult:
    granted: bool
    reason: Optional[AccessDenialReason] = None


ACCESS_DENIED = Notification(
    title="Access Denied",
    description="You need admin privileges to access this page",
    severity=Severity.DESTRUCTIVE,
)


async def check_access(
    context: SessionContext,
    gateway: StoreGateway,
    notifier: Notifier,
    navigator: Navigator,
) -> AccessResult:
    """
    Runs the admin check for the session's actor.

    Denials redirect as a side effect: to the login page when nobody is
    signed in, otherwise home. A failing role check counts as a denial.
    """
    actor_id = context.actor_id
    if not actor_id:
        logger.info("Admin access attempted without an authenticated actor.")
        navigator.redirect(Surface.LOGIN)
        return AccessResult(granted=False, reason=AccessDenialReason.NO_ACTOR)

    try:
        is_admin = await gateway.is_admin(actor_id)
    except Exception as e:
        logger.exception(f"Error checking admin status for '{actor_id}': {e}")
        navigator.redirect(Surface.HOME)
        return AccessResult(granted=False, reason=AccessDenialReason.ROLE_CHECK_FAILED)

    if not is_admin:
        logger.warning(f"Actor '{actor_id}' denied admin access.")
        notifier.notify(ACCESS_DENIED)
        navigator.redirect(Surface.HOME)
        return AccessResult(granted=False, reason=AccessDenialReason.NOT_ADMIN)

    logger.debug(f"Actor '{actor_id}' granted admin access.")
    return AccessResult(granted=True)
