import base64
import logging
from typing import Any

import requests

from models import PushMessage
from repositories import DevicePushRepository

ONESIGNAL_URL = 'https://api.onesignal.com/notifications'
NOTIFICATION_TYPE = 'assignment_status_update'
DEFAULT_ACCENT_COLOR = '3b82f6'


class RestOneSignalRepository(DevicePushRepository):
    def __init__(self, app_id: str, api_key: str, android_channel_id: str | None = None, timeout: float = 5) -> None:
        self.app_id = app_id
        self.api_key = api_key
        self.android_channel_id = android_channel_id
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def auth_header(self) -> str:
        # v2 app keys use the Key scheme, legacy REST keys use Basic
        if self.api_key.startswith('os_v2_app_'):
            return f'Key {self.api_key}'

        encoded = base64.b64encode(f'{self.api_key}:'.encode()).decode()
        return f'Basic {encoded}'

    def build_payload(self, player_ids: list[str], message: PushMessage) -> dict[str, Any]:
        payload: dict[str, Any] = {
            'app_id': self.app_id,
            'include_player_ids': player_ids,
            'headings': {'en': message.title},
            'contents': {'en': message.body},
            'data': {'type': NOTIFICATION_TYPE, **message.data},
            'priority': 10 if message.important else 5,
            'android_visibility': 1,
            'android_accent_color': message.accent_color or DEFAULT_ACCENT_COLOR,
            'ios_badgeType': 'Increase',
            'ios_badgeCount': 1,
            'content_available': True,
        }

        if self.android_channel_id:
            payload['android_channel_id'] = self.android_channel_id

        if message.group:
            payload['android_group'] = message.group
            if message.group_summary:
                payload['android_group_message'] = {'en': message.group_summary}

        if message.important:
            payload['android_sound'] = 'emergency_alert'
            payload['ios_sound'] = 'emergency_alert.wav'

        return payload

    def send(self, player_ids: list[str], message: PushMessage) -> int:
        if not self.api_key or not self.app_id:
            self.logger.warning('OneSignal is not configured, skipping push to %d device(s)', len(player_ids))
            return 0

        if not player_ids:
            return 0

        resp = requests.post(
            ONESIGNAL_URL,
            json=self.build_payload(player_ids, message),
            headers={'Authorization': self.auth_header()},
            timeout=self.timeout,
        )

        if resp.status_code != requests.codes.ok:
            self.logger.error('OneSignal API error %d: %s', resp.status_code, resp.text)
            resp.raise_for_status()
            raise requests.HTTPError(f'Unexpected status code: {resp.status_code}', response=resp)

        data = resp.json()

        errors = data.get('errors')
        if isinstance(errors, dict) and errors.get('invalid_player_ids'):
            self.logger.warning('OneSignal reported invalid player ids: %s', errors['invalid_player_ids'])
        elif errors:
            self.logger.warning('OneSignal reported errors: %s', errors)

        return int(data.get('recipients') or 0)
