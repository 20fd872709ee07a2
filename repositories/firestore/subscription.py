from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore_v1.base_query import FieldFilter

from repositories import SubscriptionRepository


class FirestoreSubscriptionRepository(SubscriptionRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)

    def get_player_ids(self, user_id: str) -> list[str]:
        docs = (
            self.db.collection('onesignal_subscriptions')
            .where(filter=FieldFilter('user_id', '==', user_id))  # type: ignore[no-untyped-call]
            .get()
        )

        return [player_id for doc in docs if (player_id := (doc.to_dict() or {}).get('player_id'))]
