import logging

from models import AuditEntry, SinkOutcome, TransitionEvent
from repositories import AuditRepository

from .events import report_details

logger = logging.getLogger(__name__)


def record_transition(audit_repo: AuditRepository, event: TransitionEvent) -> SinkOutcome:
    entry = AuditEntry(
        entity_type='assignment',
        entity_id=event.assignment_id,
        action='status_update',
        user_id=event.responder_id,
        details=report_details(event),
        created_at=event.updated_at,
    )

    try:
        audit_repo.create(entry)
    except Exception as err:
        logger.warning('Failed to log status update audit for assignment %s: %s', event.assignment_id, err)
        return SinkOutcome(sink='audit', failures=[str(err)])

    return SinkOutcome(sink='audit', delivered=1)
