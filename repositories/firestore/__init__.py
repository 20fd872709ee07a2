from .app_version import FirestoreAppVersionRepository
from .assignment import FirestoreAssignmentRepository
from .audit import FirestoreAuditRepository
from .notification import FirestoreNotificationRepository
from .responder import FirestoreResponderRepository
from .subscription import FirestoreSubscriptionRepository

__all__ = [
    'FirestoreAppVersionRepository',
    'FirestoreAssignmentRepository',
    'FirestoreAuditRepository',
    'FirestoreNotificationRepository',
    'FirestoreResponderRepository',
    'FirestoreSubscriptionRepository',
]
