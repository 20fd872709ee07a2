from models import Responder


class ResponderRepository:
    def get(self, responder_id: str) -> Responder | None:
        raise NotImplementedError  # pragma: no cover

    def get_admins(self, limit: int | None = None) -> list[Responder]:
        raise NotImplementedError  # pragma: no cover
