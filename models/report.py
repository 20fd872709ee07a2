from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .location import Location

REPORT_COMPLETED = 'completed'


class LifecycleStatus(StrEnum):
    ACCEPTED = 'accepted'
    ENROUTE = 'enroute'
    ON_SCENE = 'on_scene'
    RESOLVED = 'resolved'


class Severity(StrEnum):
    CRITICAL = 'CRITICAL'
    HIGH = 'HIGH'
    MEDIUM = 'MEDIUM'
    LOW = 'LOW'


@dataclass
class Report:
    id: str
    type: str | None = None
    corrected_type: str | None = None
    message: str | None = None
    location: Location | None = None
    reporter_uid: str | None = None
    reporter_name: str | None = None
    user_id: str | None = None
    lifecycle_status: str | None = None
    priority: int | None = None
    severity: str | None = None
    response_time: str | None = None
    emergency_icon: str | None = None
    created_at: datetime | None = None

    @property
    def reporter_user_id(self) -> str | None:
        # Authenticated reporters carry user_id, legacy anonymous reports only reporter_uid
        return self.user_id or self.reporter_uid

    @property
    def effective_type(self) -> str:
        return (self.corrected_type or self.type or '').strip().lower()
