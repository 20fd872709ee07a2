import logging
from typing import Any

from models import AssignmentStatus, Notification, PushMessage, PushTarget, SinkOutcome, TransitionEvent
from repositories import (
    BroadcastRepository,
    DevicePushRepository,
    NotificationRepository,
    PushRepository,
    ResponderRepository,
    SubscriptionRepository,
)

from . import transitions
from .admins import admin_inboxes
from .best_effort import Task
from .events import event_details, event_to_dict, report_context
from .validation import is_uuid

NOTIFICATION_TYPE = 'assignment_status_update'

REPORTER_MESSAGES = {
    AssignmentStatus.ACCEPTED: 'A responder has accepted your emergency report',
    AssignmentStatus.ENROUTE: 'A responder is on the way to your location',
    AssignmentStatus.ON_SCENE: 'A responder has arrived at your location',
    AssignmentStatus.RESOLVED: 'Your emergency report has been resolved',
}

REPORTER_PUSH = {
    AssignmentStatus.ACCEPTED: (
        'Responder Accepted Your Report',
        'A responder has accepted your emergency report and will be assisting you shortly.',
    ),
    AssignmentStatus.ENROUTE: ('Help is on the Way', 'A responder is currently enroute to your location.'),
    AssignmentStatus.ON_SCENE: (
        'Responder Arrived',
        'A responder has arrived at your location and is providing assistance.',
    ),
    AssignmentStatus.RESOLVED: ('Report Resolved', 'Your emergency report has been successfully resolved.'),
}

IMPORTANT_STATUSES = frozenset({AssignmentStatus.ON_SCENE, AssignmentStatus.RESOLVED})


class NotificationFanout:
    """
    Delivers a transition event to the admin and reporter in-app inboxes, the realtime channels and push.

    Every sink returns a `SinkOutcome` instead of raising. Inside the realtime and push sinks each
    channel or delivery path is attempted independently, so one failing recipient does not hide
    the others.
    """

    def __init__(
        self,
        notification_repo: NotificationRepository,
        responder_repo: ResponderRepository,
        subscription_repo: SubscriptionRepository,
        push_repo: PushRepository,
        device_push_repo: DevicePushRepository,
        broadcast_repo: BroadcastRepository,
        admin_limit: int = 5,
    ) -> None:
        self.notification_repo = notification_repo
        self.responder_repo = responder_repo
        self.subscription_repo = subscription_repo
        self.push_repo = push_repo
        self.device_push_repo = device_push_repo
        self.broadcast_repo = broadcast_repo
        self.admin_limit = admin_limit
        self.logger = logging.getLogger(self.__class__.__name__)

    def sinks(self, event: TransitionEvent) -> list[Task]:
        return [
            ('admin_inapp', lambda: self.notify_admins(event)),
            ('reporter_inapp', lambda: self.notify_reporter(event)),
            ('realtime', lambda: self.broadcast(event)),
            ('push', lambda: self.push(event)),
        ]

    def notify_admins(self, event: TransitionEvent) -> SinkOutcome:
        outcome = SinkOutcome(sink='admin_inapp')

        try:
            admins = self.responder_repo.get_admins(self.admin_limit)
            notifications = [
                Notification(
                    user_id=user_id,
                    type=NOTIFICATION_TYPE,
                    title='Assignment Status Updated',
                    message=f'Assignment status changed from {event.previous_status} to {event.new_status}',
                    data=event_details(event),
                    created_at=event.updated_at,
                )
                for user_id in admin_inboxes(admins)
            ]
            self.notification_repo.create_many(notifications)
        except Exception as err:
            self.logger.warning('Failed to insert admin notifications for assignment %s: %s', event.assignment_id, err)
            outcome.failures.append(str(err))
            return outcome

        outcome.delivered = len(notifications)
        return outcome

    def notify_reporter(self, event: TransitionEvent) -> SinkOutcome:
        outcome = SinkOutcome(sink='reporter_inapp')
        reporter_id = event.report.reporter_user_id

        if not reporter_id:
            self.logger.warning('Report %s has no reporter identity, skipping reporter notification', event.report_id)
            return outcome

        notification = Notification(
            user_id=reporter_id,
            type=NOTIFICATION_TYPE,
            title='Your Report Update',
            message=REPORTER_MESSAGES[event.new_status],
            data=event_details(event),
            created_at=event.updated_at,
        )

        try:
            self.notification_repo.create_many([notification])
        except Exception as err:
            self.logger.warning(
                'Failed to insert reporter notification for user %s, report %s: %s', reporter_id, event.report_id, err
            )
            outcome.failures.append(str(err))
            return outcome

        outcome.delivered = 1
        return outcome

    def channels(self, event: TransitionEvent) -> list[tuple[str, str, dict[str, Any]]]:
        lifecycle = transitions.lifecycle_for(event.new_status).value
        assignment_payload = {**event_to_dict(event), 'notes': event.notes, 'report': report_context(event)}
        location = event.report.location

        channels = [(f'private:responder:{event.responder_id}', 'assignment.status_updated', assignment_payload)]

        reporter_id = event.report.reporter_user_id
        if reporter_id:
            channels.append(
                (
                    f'private:user:{reporter_id}',
                    'report.status_updated',
                    {
                        'report_id': event.report_id,
                        'assignment_id': event.assignment_id,
                        'previous_status': event.previous_status.value,
                        'new_status': event.new_status.value,
                        'lifecycle_status': lifecycle,
                        'updated_at': event.updated_at.isoformat(),
                        'notes': event.notes,
                        'report': report_context(event),
                    },
                )
            )

        channels.append(('private:admin', 'assignment.status_updated', assignment_payload))
        channels.append(
            (
                'public:reports',
                'report.updated',
                {
                    'id': event.report_id,
                    'status': event.new_status.value,
                    'lifecycle_status': lifecycle,
                    'type': event.report.type,
                    'lat': location.lat if location else None,
                    'lng': location.lng if location else None,
                    'responder_id': event.responder_id,
                    'last_update': event.updated_at.isoformat(),
                },
            )
        )

        return channels

    def broadcast(self, event: TransitionEvent) -> SinkOutcome:
        outcome = SinkOutcome(sink='realtime')

        for topic, name, payload in self.channels(event):
            try:
                self.broadcast_repo.broadcast(topic, name, payload)
            except Exception as err:
                self.logger.warning(
                    'Realtime broadcast on %s failed for assignment %s: %s', topic, event.assignment_id, err
                )
                outcome.failures.append(f'{topic}: {err}')
            else:
                outcome.delivered += 1

        return outcome

    def push(self, event: TransitionEvent) -> SinkOutcome:
        outcome = SinkOutcome(sink='push')
        important = event.new_status in IMPORTANT_STATUSES

        responder_message = PushMessage(
            title='Assignment Status Updated',
            body=f'Status changed from {event.previous_status} to {event.new_status}',
            data={
                'assignmentId': event.assignment_id,
                'reportId': event.report_id,
                'previousStatus': event.previous_status.value,
                'newStatus': event.new_status.value,
                'notes': event.notes,
                'timestamp': event.updated_at.isoformat(),
            },
            important=important,
        )

        try:
            outcome.delivered += self.push_repo.send(PushTarget.RESPONDER, event.responder_id, responder_message)
        except Exception as err:
            self.logger.warning('Push to responder %s failed: %s', event.responder_id, err)
            outcome.failures.append(f'responder {event.responder_id}: {err}')

        reporter_id = event.report.reporter_user_id
        if not reporter_id:
            self.logger.warning('Report %s has no reporter identity, skipping reporter push', event.report_id)
            return outcome

        if not is_uuid(reporter_id):
            self.logger.warning(
                'Reporter id %s of report %s is not a valid UUID, skipping reporter push', reporter_id, event.report_id
            )
            return outcome

        title, body = REPORTER_PUSH[event.new_status]
        data = {
            'reportId': event.report_id,
            'assignmentId': event.assignment_id,
            'newStatus': event.new_status.value,
            'lifecycleStatus': transitions.lifecycle_for(event.new_status).value,
            'timestamp': event.updated_at.isoformat(),
        }

        try:
            player_ids = self.subscription_repo.get_player_ids(reporter_id)
            if player_ids:
                device_message = PushMessage(
                    title=f'{"✅" if important else "📢"} {title}', body=body, data=data, important=important
                )
                outcome.delivered += self.device_push_repo.send(player_ids, device_message)
            else:
                self.logger.warning('No OneSignal subscriptions found for reporter %s', reporter_id)
        except Exception as err:
            self.logger.warning('OneSignal push to reporter %s failed: %s', reporter_id, err)
            outcome.failures.append(f'onesignal {reporter_id}: {err}')

        try:
            web_message = PushMessage(title=title, body=body, data=data, important=important)
            outcome.delivered += self.push_repo.send(PushTarget.USER, reporter_id, web_message)
        except Exception as err:
            self.logger.warning('Web push to reporter %s failed: %s', reporter_id, err)
            outcome.failures.append(f'webpush {reporter_id}: {err}')

        return outcome
