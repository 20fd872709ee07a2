import logging
from typing import Any, cast

import dacite
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore_v1 import DocumentSnapshot, Query
from google.cloud.firestore_v1.base_query import FieldFilter

from models import Responder, Role, StoreError
from repositories import ResponderRepository


class FirestoreResponderRepository(ResponderRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def doc_to_responder(self, doc: DocumentSnapshot) -> Responder:
        return dacite.from_dict(
            data_class=Responder,
            data={
                **cast(dict[str, Any], doc.to_dict()),
                'id': doc.id,
            },
        )

    def get(self, responder_id: str) -> Responder | None:
        doc = self.db.collection('responders').document(responder_id).get()

        if not doc.exists:
            return None

        return self.doc_to_responder(doc)

    def get_admins(self, limit: int | None = None) -> list[Responder]:
        query: Query = self.db.collection('responders').where(
            filter=FieldFilter('role', '==', Role.ADMIN.value)  # type: ignore[no-untyped-call]
        )
        if limit is not None:
            query = query.limit(limit)

        try:
            return [self.doc_to_responder(cast(DocumentSnapshot, doc)) for doc in query.get()]
        except GoogleAPIError as err:
            raise StoreError(f'Failed to fetch admins: {err}') from err
