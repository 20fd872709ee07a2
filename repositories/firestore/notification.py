import logging
from dataclasses import asdict

from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]

from models import Notification
from repositories import NotificationRepository


class FirestoreNotificationRepository(NotificationRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def create_many(self, notifications: list[Notification]) -> None:
        if not notifications:
            return

        batch = self.db.batch()
        for notification in notifications:
            batch.set(self.db.collection('notifications').document(), asdict(notification))
        batch.commit()
