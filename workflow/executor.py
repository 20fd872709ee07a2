import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from models import (
    REPORT_COMPLETED,
    Assignment,
    AssignmentStatus,
    Report,
    StatusUpdateRequest,
    StoreError,
    TransactionError,
    TransitionEvent,
)
from repositories import AssignmentRepository

from . import transitions


def utcnow() -> datetime:
    return datetime.now(UTC)


class TransitionExecutor:
    """
    Applies a status transition to an assignment and its report.

    The two writes are not a real transaction. The assignment write is conditioned on the status
    read at the start of the request, and a failed report write is compensated by restoring the
    snapshot's status and updated_at. If that compensating write fails too, the assignment is left
    at the new status while the report still shows the old lifecycle. That case is logged and
    reported through `TransactionError.rolled_back`; nothing retries it.
    """

    def __init__(self, assignment_repo: AssignmentRepository, clock: Callable[[], datetime] = utcnow) -> None:
        self.assignment_repo = assignment_repo
        self.clock = clock
        self.logger = logging.getLogger(self.__class__.__name__)

    def assignment_update(self, request: StatusUpdateRequest, now: datetime) -> dict[str, Any]:
        fields: dict[str, Any] = {
            'status': request.status.value,
            'updated_at': now,
            request.status.timestamp_field: now,
        }

        if request.notes:
            fields['notes'] = request.notes

        return fields

    def report_update(self, target: AssignmentStatus, now: datetime) -> dict[str, Any]:
        fields: dict[str, Any] = {
            'lifecycle_status': transitions.lifecycle_for(target).value,
            'last_update': now,
        }

        if target == AssignmentStatus.RESOLVED:
            fields['status'] = REPORT_COMPLETED

        return fields

    def rollback(self, snapshot: Assignment) -> bool:
        try:
            self.assignment_repo.update_assignment(
                snapshot.id,
                {'status': snapshot.status.value, 'updated_at': snapshot.updated_at},
            )
        except StoreError:
            self.logger.exception(
                'Rollback of assignment %s to %s failed, assignment and report %s are inconsistent',
                snapshot.id,
                snapshot.status.value,
                snapshot.report_id,
            )
            return False

        self.logger.info('Rolled back assignment %s to %s', snapshot.id, snapshot.status.value)
        return True

    def execute(self, snapshot: Assignment, request: StatusUpdateRequest) -> TransitionEvent:
        transitions.ensure_legal(snapshot.status, request.status)

        now = self.clock()

        self.assignment_repo.update_assignment(
            snapshot.id, self.assignment_update(request, now), expected_status=snapshot.status
        )

        try:
            self.assignment_repo.update_report(snapshot.report_id, self.report_update(request.status, now))
        except StoreError as err:
            self.logger.error('Report %s update failed for assignment %s: %s', snapshot.report_id, snapshot.id, err)
            rolled_back = self.rollback(snapshot)
            raise TransactionError(f'Failed to update report: {err.message}', rolled_back=rolled_back) from err

        return TransitionEvent(
            assignment_id=snapshot.id,
            report_id=snapshot.report_id,
            responder_id=request.responder_id,
            previous_status=snapshot.status,
            new_status=request.status,
            updated_at=now,
            notes=request.notes,
            report=snapshot.report or Report(id=snapshot.report_id),
        )
