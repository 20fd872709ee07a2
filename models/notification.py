from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class PushTarget(StrEnum):
    RESPONDER = 'responder'
    USER = 'user'


@dataclass
class Notification:
    user_id: str
    type: str
    title: str
    message: str
    data: dict[str, Any]
    created_at: datetime
    read: bool = False


@dataclass
class PushMessage:
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    important: bool = False
    accent_color: str | None = None
    group: str | None = None
    group_summary: str | None = None


@dataclass
class SinkOutcome:
    sink: str
    delivered: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
