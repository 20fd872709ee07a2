from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    ADMIN = 'admin'
    RESPONDER = 'responder'


@dataclass
class Responder:
    id: str
    name: str
    role: str
    user_id: str | None = None
    onesignal_player_id: str | None = None
