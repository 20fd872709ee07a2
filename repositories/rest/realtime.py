import logging
from typing import Any

from repositories import BroadcastRepository

from .util import SupabaseRestRepository, TokenProvider


class RestBroadcastRepository(SupabaseRestRepository, BroadcastRepository):
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float = 5) -> None:
        super().__init__(base_url, token_provider, timeout)
        self.logger = logging.getLogger(self.__class__.__name__)

    def broadcast(self, topic: str, event: str, payload: dict[str, Any]) -> None:
        url = f'{self.base_url}/realtime/v1/api/broadcast'
        body = {
            'messages': [
                {
                    'topic': topic,
                    'event': event,
                    'payload': payload,
                    'private': topic.startswith('private:'),
                }
            ]
        }

        resp = self.authenticated_post(url, body)
        resp.raise_for_status()
