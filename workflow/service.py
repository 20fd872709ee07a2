import logging
from dataclasses import dataclass, field
from typing import Any

from models import ServiceError, TransitionEvent
from repositories import AssignmentRepository, AuditRepository

from . import transitions
from .audit import record_transition
from .authorization import authorize
from .best_effort import log_summary, run_best_effort
from .events import event_to_dict
from .executor import TransitionExecutor
from .fanout import NotificationFanout
from .validation import validate_request


@dataclass
class StatusUpdateResult:
    success: bool
    status_code: int
    data: dict[str, Any] = field(default_factory=dict)
    message: str | None = None
    error: str | None = None
    event: TransitionEvent | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {'success': True, 'data': self.data, 'message': self.message}

        return {'success': False, 'error': self.error}


class StatusUpdateService:
    def __init__(
        self,
        assignment_repo: AssignmentRepository,
        audit_repo: AuditRepository,
        fanout: NotificationFanout,
        executor: TransitionExecutor | None = None,
        fanout_timeout: float = 10,
    ) -> None:
        self.assignment_repo = assignment_repo
        self.audit_repo = audit_repo
        self.fanout = fanout
        self.executor = executor or TransitionExecutor(assignment_repo)
        self.fanout_timeout = fanout_timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def transition(self, payload: Any) -> TransitionEvent:
        request = validate_request(payload)

        # Single snapshot for the whole request, the executor's write is conditioned on its status
        snapshot = self.assignment_repo.get(request.assignment_id)

        transitions.ensure_legal(snapshot.status, request.status)
        authorize(self.assignment_repo, request.assignment_id, request.responder_id)

        return self.executor.execute(snapshot, request)

    def notify(self, event: TransitionEvent) -> None:
        tasks = [('audit', lambda: record_transition(self.audit_repo, event)), *self.fanout.sinks(event)]
        outcomes = run_best_effort(tasks, self.fanout_timeout)
        log_summary(f'assignment {event.assignment_id}', outcomes)

    def update_status(self, payload: Any) -> StatusUpdateResult:
        try:
            event = self.transition(payload)
        except ServiceError as err:
            self.logger.warning('Assignment status update rejected: %s', err.message)
            return StatusUpdateResult(success=False, status_code=err.status_code, error=err.message)

        self.logger.info(
            'Assignment %s moved from %s to %s by responder %s',
            event.assignment_id,
            event.previous_status,
            event.new_status,
            event.responder_id,
        )

        self.notify(event)

        return StatusUpdateResult(
            success=True,
            status_code=200,
            data=event_to_dict(event),
            message=f'Assignment status updated from {event.previous_status} to {event.new_status}',
            event=event,
        )
