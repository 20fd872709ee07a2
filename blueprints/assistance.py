import logging
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import Notification, PushMessage, Report, Responder
from repositories import AssignmentRepository, DevicePushRepository, NotificationRepository, ResponderRepository
from workflow import admin_inboxes, admin_player_ids

from .util import class_route, error_response, json_response

blp = Blueprint('Responder assistance', __name__)

logger = logging.getLogger(__name__)

NOTIFICATION_TYPE = 'responder_needs_assistance'


class AssistanceKind(StrEnum):
    ASSISTANCE = 'assistance'
    BACKUP = 'backup'


def build_alert(kind: AssistanceKind, responder: Responder, report: Report | None) -> tuple[str, str]:
    report_type = (report.type if report else None) or 'Incident'

    if kind == AssistanceKind.BACKUP:
        title = '🆘 Responder requested backup'
        if report is not None:
            return title, f'{responder.name} ({responder.role}) requested backup for {report_type} incident.'
        return title, f'{responder.name} ({responder.role}) needs assistance.'

    return '🆘 Responder needs assistance', f'{responder.name} ({responder.role}) needs assistance.'


def alert_payload(
    kind: AssistanceKind, responder: Responder, assignment_id: str | None, report: Report | None
) -> dict[str, Any]:
    return {
        'kind': kind.value,
        'responder_id': responder.id,
        'responder_name': responder.name,
        'responder_role': responder.role,
        'assignment_id': assignment_id,
        'report_id': report.id if report else None,
        'report_type': (report.type if report else None) or 'Incident',
    }


@class_route(blp, '/api/v1/responders/assistance')
class RequestAssistance(MethodView):
    init_every_request = False

    @inject
    def post(
        self,
        responder_repo: ResponderRepository = Provide[Container.responder_repo],
        assignment_repo: AssignmentRepository = Provide[Container.assignment_repo],
        notification_repo: NotificationRepository = Provide[Container.notification_repo],
        device_push_repo: DevicePushRepository = Provide[Container.device_push_repo],
    ) -> Response:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}

        kind = body.get('kind')
        responder_id = body.get('responder_id')
        if not responder_id or kind not in list(AssistanceKind):
            return error_response('responder_id and kind (assistance|backup) are required', 400)

        responder = responder_repo.get(responder_id)
        if responder is None:
            return error_response('Responder not found', 404)

        report_id = body.get('report_id')
        report = assignment_repo.get_report(report_id) if report_id else None

        alert_kind = AssistanceKind(kind)
        title, message = build_alert(alert_kind, responder, report)
        payload = alert_payload(alert_kind, responder, body.get('assignment_id'), report)

        admins = responder_repo.get_admins()
        if not admins:
            return json_response({'success': True, 'sent': 0, 'message': 'No super users to notify'}, 200)

        now = datetime.now(UTC)
        inboxes = admin_inboxes(admins)
        notification_repo.create_many(
            [
                Notification(
                    user_id=user_id,
                    type=NOTIFICATION_TYPE,
                    title=title,
                    message=message,
                    data=payload,
                    created_at=now,
                )
                for user_id in inboxes
            ]
        )

        push = PushMessage(title=title, body=message, data={'type': NOTIFICATION_TYPE, **payload}, important=True)

        try:
            sent = device_push_repo.send(admin_player_ids(admins), push)
        except Exception as err:
            logger.warning('Assistance push for responder %s failed: %s', responder.id, err)
            return json_response(
                {
                    'success': True,
                    'sent': 0,
                    'notified_users': len(inboxes),
                    'message': f'Database notifications created; push failed: {err}',
                },
                200,
            )

        return json_response(
            {
                'success': True,
                'sent': sent,
                'notified_users': len(inboxes),
                'message': f'Push sent to {sent} super user(s); in-app notifications for {len(inboxes)}',
            },
            200,
        )
