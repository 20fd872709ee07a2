import logging
from datetime import UTC, datetime
from enum import Enum
from typing import Any, cast

import dacite
from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore_v1 import DocumentSnapshot

from models import AppVersion, Platform
from repositories import AppVersionRepository


class FirestoreAppVersionRepository(AppVersionRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def doc_to_app_version(self, doc: DocumentSnapshot) -> AppVersion:
        data = cast(dict[str, Any], doc.to_dict())

        # Some rows carry the APK-specific column names
        return dacite.from_dict(
            data_class=AppVersion,
            data={
                **data,
                'platform': doc.id,
                'min_version': data.get('min_version_apk') or data.get('min_version'),
                'latest_version': data.get('latest_version_apk') or data.get('latest_version'),
            },
            config=dacite.Config(cast=[Enum]),
        )

    def get(self, platform: Platform) -> AppVersion | None:
        doc = self.db.collection('app_versions').document(platform.value).get()

        if not doc.exists:
            return None

        return self.doc_to_app_version(doc)

    def set_version(self, platform: Platform, version: str) -> AppVersion:
        ref = self.db.collection('app_versions').document(platform.value)
        ref.set(
            {'min_version': version, 'latest_version': version, 'updated_at': datetime.now(UTC)},
            merge=True,
        )

        return self.doc_to_app_version(ref.get())
