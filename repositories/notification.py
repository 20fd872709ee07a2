from models import Notification


class NotificationRepository:
    def create_many(self, notifications: list[Notification]) -> None:
        raise NotImplementedError  # pragma: no cover
