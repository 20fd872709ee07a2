import logging

from models import Responder

logger = logging.getLogger(__name__)


def admin_inboxes(admins: list[Responder]) -> list[str]:
    """User ids of the admins that can receive in-app notifications. Admins without one are logged and skipped."""
    skipped = [admin.id for admin in admins if not admin.user_id]
    if skipped:
        logger.warning('Skipping in-app notification for admins without a user_id: %s', ', '.join(skipped))

    return [admin.user_id for admin in admins if admin.user_id]


def admin_player_ids(admins: list[Responder]) -> list[str]:
    return [admin.onesignal_player_id for admin in admins if admin.onesignal_player_id]
