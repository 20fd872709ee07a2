from dataclasses import asdict
from typing import Any

from models import TransitionEvent


def event_to_dict(event: TransitionEvent) -> dict[str, Any]:
    data: dict[str, Any] = {
        'assignment_id': event.assignment_id,
        'report_id': event.report_id,
        'responder_id': event.responder_id,
        'previous_status': event.previous_status.value,
        'new_status': event.new_status.value,
        'updated_at': event.updated_at.isoformat(),
    }

    if event.notes is not None:
        data['notes'] = event.notes

    return data


def report_location(event: TransitionEvent) -> dict[str, Any] | None:
    return asdict(event.report.location) if event.report.location is not None else None


def report_context(event: TransitionEvent) -> dict[str, Any]:
    return {
        'type': event.report.type,
        'message': event.report.message,
        'location': report_location(event),
    }


def report_details(event: TransitionEvent) -> dict[str, Any]:
    return {
        **event_to_dict(event),
        'notes': event.notes,
        'report_type': event.report.type,
        'report_location': report_location(event),
    }


def event_details(event: TransitionEvent) -> dict[str, Any]:
    return {**report_details(event), 'report_message': event.report.message}
