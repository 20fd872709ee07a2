from .app_version import AppVersionRepository
from .assignment import AssignmentRepository
from .audit import AuditRepository
from .broadcast import BroadcastRepository
from .notification import NotificationRepository
from .push import DevicePushRepository, PushRepository
from .responder import ResponderRepository
from .subscription import SubscriptionRepository

__all__ = [
    'AppVersionRepository',
    'AssignmentRepository',
    'AuditRepository',
    'BroadcastRepository',
    'NotificationRepository',
    'DevicePushRepository',
    'PushRepository',
    'ResponderRepository',
    'SubscriptionRepository',
]
