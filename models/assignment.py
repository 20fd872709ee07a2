from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .errors import InvalidStateError
from .report import Report


class AssignmentStatus(StrEnum):
    ASSIGNED = 'assigned'
    ACCEPTED = 'accepted'
    ENROUTE = 'enroute'
    ON_SCENE = 'on_scene'
    RESOLVED = 'resolved'

    @property
    def timestamp_field(self) -> str:
        return f'{self.value}_at'

    @staticmethod
    def parse(value: str) -> 'AssignmentStatus':
        try:
            return AssignmentStatus(value)
        except ValueError as err:
            raise InvalidStateError(str(value)) from err


@dataclass
class Assignment:
    id: str
    report_id: str
    responder_id: str
    status: AssignmentStatus
    assigned_at: datetime | None = None
    accepted_at: datetime | None = None
    enroute_at: datetime | None = None
    on_scene_at: datetime | None = None
    resolved_at: datetime | None = None
    notes: str | None = None
    updated_at: datetime | None = None
    report: Report | None = None
