from .admins import admin_inboxes, admin_player_ids
from .executor import TransitionExecutor
from .fanout import NotificationFanout
from .service import StatusUpdateResult, StatusUpdateService

__all__ = [
    'admin_inboxes',
    'admin_player_ids',
    'TransitionExecutor',
    'NotificationFanout',
    'StatusUpdateResult',
    'StatusUpdateService',
]
