from models import AuditEntry


class AuditRepository:
    def create(self, entry: AuditEntry) -> None:
        raise NotImplementedError  # pragma: no cover
