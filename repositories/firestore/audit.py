import logging
from dataclasses import asdict

from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]

from models import AuditEntry
from repositories import AuditRepository


class FirestoreAuditRepository(AuditRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, entry: AuditEntry) -> None:
        self.db.collection('audit_log').add(asdict(entry))
