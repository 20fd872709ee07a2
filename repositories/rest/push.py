import logging

import requests

from models import PushMessage, PushTarget
from repositories import PushRepository

from .util import SupabaseRestRepository, TokenProvider

PUSH_ICON = '/icon-192x192.png'


class RestPushRepository(SupabaseRestRepository, PushRepository):
    """Web push through the `push-send` edge function."""

    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float = 5) -> None:
        super().__init__(base_url, token_provider, timeout)
        self.logger = logging.getLogger(self.__class__.__name__)

    def send(self, target: PushTarget, recipient_id: str, message: PushMessage) -> int:
        url = f'{self.base_url}/functions/v1/push-send'
        body = {
            'target': target.value,
            f'{target.value}_id': recipient_id,
            'payload': {
                'title': message.title,
                'body': message.body,
                'icon': PUSH_ICON,
                'data': message.data,
            },
        }

        resp = self.authenticated_post(url, body)

        if resp.status_code != requests.codes.ok:
            self.logger.warning(
                'push-send rejected %s %s with status %d: %s',
                target.value,
                recipient_id,
                resp.status_code,
                resp.text[:200],
            )
            resp.raise_for_status()
            raise requests.HTTPError(f'Unexpected status code: {resp.status_code}', response=resp)

        data = resp.json()
        return int(data.get('sent', 1)) if isinstance(data, dict) else 1
