from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class AuditEntry:
    entity_type: str
    entity_id: str
    action: str
    user_id: str
    details: dict[str, Any]
    created_at: datetime
