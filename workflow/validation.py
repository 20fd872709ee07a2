import re
from typing import Any

from models import AssignmentStatus, StatusUpdateRequest, ValidationError

UUID_RE = re.compile(r'^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$', re.IGNORECASE)

TARGET_STATUSES = [
    AssignmentStatus.ACCEPTED,
    AssignmentStatus.ENROUTE,
    AssignmentStatus.ON_SCENE,
    AssignmentStatus.RESOLVED,
]

MAX_NOTES_LENGTH = 1000


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and UUID_RE.match(value) is not None


def require_uuid(data: dict[str, Any], field: str) -> str:
    value = data.get(field)

    if not value or not isinstance(value, str):
        raise ValidationError(f'{field} is required and must be a string')

    if not is_uuid(value):
        raise ValidationError(f'{field} must be a valid UUID')

    return value


def validate_request(data: Any) -> StatusUpdateRequest:
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    assignment_id = require_uuid(data, 'assignment_id')
    responder_id = require_uuid(data, 'responder_id')

    status = data.get('status')
    if not status or not isinstance(status, str):
        raise ValidationError('status is required and must be a string')

    if status not in TARGET_STATUSES:
        raise ValidationError(f'status must be one of: {", ".join(TARGET_STATUSES)}')

    notes = data.get('notes')
    if notes is not None and not isinstance(notes, str):
        raise ValidationError('notes must be a string if provided')

    if notes is not None and len(notes) > MAX_NOTES_LENGTH:
        raise ValidationError(f'notes must be {MAX_NOTES_LENGTH} characters or less')

    return StatusUpdateRequest(
        assignment_id=assignment_id,
        status=AssignmentStatus(status),
        responder_id=responder_id,
        notes=notes or None,
    )
