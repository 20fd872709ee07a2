from typing import Any, cast
from unittest.mock import Mock

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from app import create_app
from blueprints.assistance import AssistanceKind, build_alert
from models import Notification, PushMessage, Report, Responder, Role
from repositories import AssignmentRepository, DevicePushRepository, NotificationRepository, ResponderRepository


class TestAssistance(ParametrizedTestCase):
    API_ENDPOINT = '/api/v1/responders/assistance'

    def setUp(self) -> None:
        self.faker = Faker()
        self.app = create_app()
        self.client = self.app.test_client()

        self.responder_repo = Mock(ResponderRepository)
        self.assignment_repo = Mock(AssignmentRepository)
        self.notification_repo = Mock(NotificationRepository)
        self.device_push_repo = Mock(DevicePushRepository)

        self.responder = Responder(id=cast(str, self.faker.uuid4()), name='Ana Cruz', role=Role.RESPONDER.value)
        self.admins = [
            Responder(
                id=cast(str, self.faker.uuid4()),
                name=self.faker.name(),
                role=Role.ADMIN.value,
                user_id=cast(str, self.faker.uuid4()),
                onesignal_player_id='player-1',
            ),
            Responder(id=cast(str, self.faker.uuid4()), name=self.faker.name(), role=Role.ADMIN.value),
        ]
        self.responder_repo.get.return_value = self.responder
        self.responder_repo.get_admins.return_value = self.admins
        self.assignment_repo.get_report.return_value = Report(id='r1', type='Fire')
        self.device_push_repo.send.return_value = 1

    def tearDown(self) -> None:
        self.app.container.unwire()

    def post(self, body: dict[str, Any]) -> Any:
        container = self.app.container

        with (
            container.responder_repo.override(self.responder_repo),
            container.assignment_repo.override(self.assignment_repo),
            container.notification_repo.override(self.notification_repo),
            container.device_push_repo.override(self.device_push_repo),
        ):
            return self.client.post(self.API_ENDPOINT, json=body)

    def test_build_alert_backup_with_report(self) -> None:
        title, message = build_alert(AssistanceKind.BACKUP, self.responder, Report(id='r1', type='Fire'))

        self.assertEqual(title, '🆘 Responder requested backup')
        self.assertEqual(message, 'Ana Cruz (responder) requested backup for Fire incident.')

    def test_build_alert_backup_without_report(self) -> None:
        _, message = build_alert(AssistanceKind.BACKUP, self.responder, None)

        self.assertEqual(message, 'Ana Cruz (responder) needs assistance.')

    def test_build_alert_assistance(self) -> None:
        title, message = build_alert(AssistanceKind.ASSISTANCE, self.responder, Report(id='r1', type='Fire'))

        self.assertEqual(title, '🆘 Responder needs assistance')
        self.assertEqual(message, 'Ana Cruz (responder) needs assistance.')

    def test_request_backup(self) -> None:
        resp = self.post({'kind': 'backup', 'responder_id': self.responder.id, 'report_id': 'r1'})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['sent'], 1)
        self.assertEqual(resp.get_json()['notified_users'], 1)

        notifications: list[Notification] = self.notification_repo.create_many.call_args.args[0]
        self.assertEqual([n.user_id for n in notifications], [self.admins[0].user_id])
        self.assertEqual(notifications[0].type, 'responder_needs_assistance')
        self.assertEqual(notifications[0].data['report_type'], 'Fire')

        player_ids, message = self.device_push_repo.send.call_args.args
        self.assertEqual(player_ids, ['player-1'])
        self.assertTrue(cast(PushMessage, message).important)

    def test_every_admin_is_notified(self) -> None:
        admins = [
            Responder(
                id=cast(str, self.faker.uuid4()),
                name=self.faker.name(),
                role=Role.ADMIN.value,
                user_id=cast(str, self.faker.uuid4()),
                onesignal_player_id=f'player-{i}',
            )
            for i in range(8)
        ]
        self.responder_repo.get_admins.return_value = admins
        self.device_push_repo.send.return_value = 8

        resp = self.post({'kind': 'assistance', 'responder_id': self.responder.id})

        self.responder_repo.get_admins.assert_called_once_with()
        self.assertEqual(resp.get_json()['notified_users'], 8)
        notifications: list[Notification] = self.notification_repo.create_many.call_args.args[0]
        self.assertEqual([n.user_id for n in notifications], [admin.user_id for admin in admins])
        player_ids, _ = self.device_push_repo.send.call_args.args
        self.assertEqual(player_ids, [f'player-{i}' for i in range(8)])

    def test_push_failure_still_succeeds(self) -> None:
        self.device_push_repo.send.side_effect = RuntimeError('onesignal down')

        resp = self.post({'kind': 'assistance', 'responder_id': self.responder.id})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['sent'], 0)
        self.assertIn('push failed', resp.get_json()['message'])
        self.notification_repo.create_many.assert_called_once()

    def test_no_admins(self) -> None:
        self.responder_repo.get_admins.return_value = []

        resp = self.post({'kind': 'assistance', 'responder_id': self.responder.id})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['sent'], 0)
        self.notification_repo.create_many.assert_not_called()

    def test_unknown_responder(self) -> None:
        self.responder_repo.get.return_value = None

        resp = self.post({'kind': 'assistance', 'responder_id': self.responder.id})

        self.assertEqual(resp.status_code, 404)

    @parametrize(
        'body',
        [
            ({'kind': 'assistance'},),
            ({'responder_id': 'x'},),
            ({'kind': 'party', 'responder_id': 'x'},),
        ],
    )
    def test_invalid_request(self, body: dict[str, str]) -> None:
        resp = self.post(body)

        self.assertEqual(resp.status_code, 400)
        self.responder_repo.get.assert_not_called()
