from typing import Any


class BroadcastRepository:
    def broadcast(self, topic: str, event: str, payload: dict[str, Any]) -> None:
        raise NotImplementedError  # pragma: no cover
