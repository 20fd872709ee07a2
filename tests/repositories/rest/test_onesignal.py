import base64
import json
from typing import cast

import responses
from faker import Faker
from requests import HTTPError
from unittest_parametrize import ParametrizedTestCase, parametrize

from models import PushMessage
from repositories.rest import RestOneSignalRepository
from repositories.rest.onesignal import ONESIGNAL_URL


class TestOneSignal(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.app_id = cast(str, self.faker.uuid4())
        self.repo = RestOneSignalRepository(self.app_id, 'legacy-key', android_channel_id='channel-1')
        self.message = PushMessage(title='📢 Help is on the Way', body='A responder is on the way', data={'a': 1})

    @parametrize(
        ('api_key', 'expected'),
        [
            ('os_v2_app_abc', 'Key os_v2_app_abc'),
            ('legacy-key', 'Basic ' + base64.b64encode(b'legacy-key:').decode()),
        ],
    )
    def test_auth_header(self, api_key: str, expected: str) -> None:
        repo = RestOneSignalRepository(self.app_id, api_key)

        self.assertEqual(repo.auth_header(), expected)

    def test_build_payload(self) -> None:
        payload = self.repo.build_payload(['p1', 'p2'], self.message)

        self.assertEqual(payload['app_id'], self.app_id)
        self.assertEqual(payload['include_player_ids'], ['p1', 'p2'])
        self.assertEqual(payload['headings'], {'en': '📢 Help is on the Way'})
        self.assertEqual(payload['data'], {'type': 'assignment_status_update', 'a': 1})
        self.assertEqual(payload['priority'], 5)
        self.assertEqual(payload['android_channel_id'], 'channel-1')
        self.assertNotIn('android_sound', payload)

    def test_build_payload_important(self) -> None:
        message = PushMessage(title='✅ Report Resolved', body='Resolved', important=True)

        payload = RestOneSignalRepository(self.app_id, 'key').build_payload(['p1'], message)

        self.assertEqual(payload['priority'], 10)
        self.assertEqual(payload['android_sound'], 'emergency_alert')
        self.assertEqual(payload['ios_sound'], 'emergency_alert.wav')
        self.assertNotIn('android_channel_id', payload)

    def test_build_payload_grouped(self) -> None:
        message = PushMessage(
            title='🚨 NEW CRITICAL REPORT',
            body='FIRE report needs immediate attention',
            important=True,
            accent_color='FF0000',
            group='critical_reports',
            group_summary='You have $[notif_count] critical reports to assign',
        )

        payload = self.repo.build_payload(['p1'], message)

        self.assertEqual(payload['android_accent_color'], 'FF0000')
        self.assertEqual(payload['android_group'], 'critical_reports')
        self.assertEqual(payload['android_group_message'], {'en': 'You have $[notif_count] critical reports to assign'})

    def test_build_payload_default_accent(self) -> None:
        payload = self.repo.build_payload(['p1'], self.message)

        self.assertEqual(payload['android_accent_color'], '3b82f6')
        self.assertNotIn('android_group', payload)

    def test_send(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.post(ONESIGNAL_URL, json={'id': 'n1', 'recipients': 2})
            sent = self.repo.send(['p1', 'p2'], self.message)
            body = json.loads(cast(bytes, rsps.calls[0].request.body))

        self.assertEqual(sent, 2)
        self.assertEqual(body['include_player_ids'], ['p1', 'p2'])

    def test_send_invalid_player_ids(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.post(ONESIGNAL_URL, json={'id': 'n1', 'recipients': 1, 'errors': {'invalid_player_ids': ['p2']}})

            with self.assertLogs('RestOneSignalRepository', level='WARNING'):
                sent = self.repo.send(['p1', 'p2'], self.message)

        self.assertEqual(sent, 1)

    @parametrize(
        'repo',
        [
            (RestOneSignalRepository('', 'key'),),
            (RestOneSignalRepository('app', ''),),
        ],
    )
    def test_send_not_configured(self, repo: RestOneSignalRepository) -> None:
        with responses.RequestsMock():
            self.assertEqual(repo.send(['p1'], self.message), 0)

    def test_send_without_player_ids(self) -> None:
        with responses.RequestsMock():
            self.assertEqual(self.repo.send([], self.message), 0)

    @parametrize('status', [(500,), (400,)])
    def test_send_error(self, status: int) -> None:
        with responses.RequestsMock() as rsps:
            rsps.post(ONESIGNAL_URL, status=status, json={'errors': ['bad request']})

            with self.assertRaises(HTTPError):
                self.repo.send(['p1'], self.message)
