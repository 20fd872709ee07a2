from .app_version import AppVersion, Platform
from .assignment import Assignment, AssignmentStatus
from .audit_entry import AuditEntry
from .errors import (
    AuthorizationError,
    IllegalTransitionError,
    InvalidStateError,
    NotFoundError,
    ServiceError,
    StoreError,
    TransactionError,
    ValidationError,
)
from .location import Location
from .notification import Notification, PushMessage, PushTarget, SinkOutcome
from .report import REPORT_COMPLETED, LifecycleStatus, Report, Severity
from .responder import Responder, Role
from .transition_event import StatusUpdateRequest, TransitionEvent

__all__ = [
    'AppVersion',
    'Platform',
    'Assignment',
    'AssignmentStatus',
    'AuditEntry',
    'ServiceError',
    'ValidationError',
    'NotFoundError',
    'InvalidStateError',
    'IllegalTransitionError',
    'AuthorizationError',
    'StoreError',
    'TransactionError',
    'Location',
    'Notification',
    'PushMessage',
    'PushTarget',
    'SinkOutcome',
    'REPORT_COMPLETED',
    'LifecycleStatus',
    'Report',
    'Severity',
    'Responder',
    'Role',
    'StatusUpdateRequest',
    'TransitionEvent',
]
