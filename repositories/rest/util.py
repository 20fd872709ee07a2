from typing import Any

import requests


class TokenProvider:
    def get_token(self) -> str:
        raise NotImplementedError  # pragma: no cover


class StaticTokenProvider(TokenProvider):
    def __init__(self, token: str) -> None:
        self.token = token

    def get_token(self) -> str:
        return self.token


class SupabaseRestRepository:
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float = 5) -> None:
        self.base_url = base_url.rstrip('/')
        self.token_provider = token_provider
        self.timeout = timeout

    def authenticated_post(self, url: str, body: dict[str, Any]) -> requests.Response:
        if self.token_provider is None:
            headers = None
        else:
            token = self.token_provider.get_token()
            headers = {'Authorization': f'Bearer {token}', 'apikey': token}

        return requests.post(url, json=body, timeout=self.timeout, headers=headers)
