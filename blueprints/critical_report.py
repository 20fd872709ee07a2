import logging
from dataclasses import asdict
from datetime import UTC, datetime
from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import Notification, PushMessage, Report, Severity, StoreError
from repositories import AssignmentRepository, DevicePushRepository, NotificationRepository, ResponderRepository
from workflow import admin_inboxes, admin_player_ids

from .util import class_route, error_response, json_response

blp = Blueprint('Critical report alert', __name__)

logger = logging.getLogger(__name__)

NOTIFICATION_TYPE = 'critical_report'
NON_CRITICAL_TYPES = frozenset({'false_alarm', 'non_emergency'})
CRITICAL_SEVERITIES = frozenset({Severity.CRITICAL, Severity.HIGH})
CRITICAL_PRIORITY = 2


def is_critical(report: Report) -> bool:
    if report.effective_type in NON_CRITICAL_TYPES:
        return False

    return (report.priority is not None and report.priority <= CRITICAL_PRIORITY) or (
        report.severity in CRITICAL_SEVERITIES
    )


def type_label(report: Report) -> str:
    return report.type.upper() if report.type else 'EMERGENCY'


def critical_payload(report: Report) -> dict[str, Any]:
    return {
        'report_id': report.id,
        'report_type': report.type,
        'priority': report.priority,
        'severity': report.severity,
        'is_critical': True,
        'location': asdict(report.location) if report.location else None,
        'response_time': report.response_time,
    }


def build_push(report: Report) -> PushMessage:
    body = f'{type_label(report)} report needs immediate attention • Response time: {report.response_time}'
    if report.location and report.location.address:
        body += f' • {report.location.address}'

    return PushMessage(
        title=f'{report.emergency_icon or "🚨"} NEW CRITICAL REPORT - ⚠️ REQUIRES IMMEDIATE ASSIGNMENT',
        body=body,
        data={
            'type': NOTIFICATION_TYPE,
            **critical_payload(report),
            'reporter_name': report.reporter_name,
            'created_at': report.created_at.isoformat() if report.created_at else None,
        },
        important=True,
        accent_color='FF0000',
        group='critical_reports',
        group_summary='You have $[notif_count] critical reports to assign',
    )


def skipped(message: str, **extra: Any) -> Response:
    return json_response({'success': True, 'sent': 0, **extra, 'message': message}, 200)


@class_route(blp, '/api/v1/reports/critical-alert')
class NotifyCriticalReport(MethodView):
    init_every_request = False

    @inject
    def post(
        self,
        assignment_repo: AssignmentRepository = Provide[Container.assignment_repo],
        responder_repo: ResponderRepository = Provide[Container.responder_repo],
        notification_repo: NotificationRepository = Provide[Container.notification_repo],
        device_push_repo: DevicePushRepository = Provide[Container.device_push_repo],
    ) -> Response:
        body = request.get_json(silent=True)
        report_id = body.get('report_id') if isinstance(body, dict) else None
        if not report_id or not isinstance(report_id, str):
            return error_response('report_id is required', 400)

        try:
            report = assignment_repo.get_report(report_id)
        except StoreError as err:
            return error_response(err.message, err.status_code)

        if report is None:
            return error_response('Report not found', 404)

        if report.effective_type in NON_CRITICAL_TYPES:
            logger.info('Report %s is a false alarm or non-emergency, skipping critical alert', report_id)
            return skipped('False alarm / non-emergency report - no critical notification sent')

        if not is_critical(report):
            logger.info('Report %s is not critical or high priority, skipping critical alert', report_id)
            return skipped('Report is not critical/high priority, no notification sent')

        try:
            admins = responder_repo.get_admins()
        except StoreError as err:
            logger.warning('Failed to fetch super users for report %s: %s', report_id, err.message)
            return skipped('Failed to fetch super users')

        if not admins:
            logger.warning('No super users found for critical report %s', report_id)
            return skipped('No super users found')

        inboxes = admin_inboxes(admins)
        now = datetime.now(UTC)
        try:
            notification_repo.create_many(
                [
                    Notification(
                        user_id=user_id,
                        type=NOTIFICATION_TYPE,
                        title='🚨 New Critical Report',
                        message=(
                            f'{type_label(report)} report requires immediate assignment • '
                            f'Response time: {report.response_time}'
                        ),
                        data=critical_payload(report),
                        created_at=now,
                    )
                    for user_id in inboxes
                ]
            )
        except Exception as err:
            logger.warning('Failed to create critical report notifications for %s: %s', report_id, err)

        player_ids = admin_player_ids(admins)
        if not player_ids:
            logger.warning('No super users with OneSignal player ids for critical report %s', report_id)
            return skipped('No super users with push notifications enabled', notified_users=len(inboxes))

        try:
            sent = device_push_repo.send(player_ids, build_push(report))
        except Exception as err:
            logger.error('Critical report push for %s failed: %s', report_id, err)
            return error_response(f'Failed to send push notification: {err}', 500)

        logger.info('Critical report %s pushed to %d super user(s)', report_id, sent)

        if sent > 0:
            message = f'Push notification sent to {sent} super users/admins; in-app notifications for {len(inboxes)}'
        else:
            message = f'In-app notifications created for {len(inboxes)} super users. Push was not delivered.'

        return json_response(
            {
                'success': True,
                'sent': sent,
                'notified_users': len(inboxes),
                'report_type': report.type,
                'priority': report.priority,
                'severity': report.severity,
                'message': message,
            },
            200,
        )
