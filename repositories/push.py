from models import PushMessage, PushTarget


class PushRepository:
    def send(self, target: PushTarget, recipient_id: str, message: PushMessage) -> int:
        raise NotImplementedError  # pragma: no cover


class DevicePushRepository:
    def send(self, player_ids: list[str], message: PushMessage) -> int:
        raise NotImplementedError  # pragma: no cover
