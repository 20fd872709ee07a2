from dataclasses import dataclass
from datetime import datetime

from .assignment import AssignmentStatus
from .report import Report


@dataclass
class StatusUpdateRequest:
    assignment_id: str
    status: AssignmentStatus
    responder_id: str
    notes: str | None = None


@dataclass
class TransitionEvent:
    assignment_id: str
    report_id: str
    responder_id: str
    previous_status: AssignmentStatus
    new_status: AssignmentStatus
    updated_at: datetime
    notes: str | None
    report: Report
