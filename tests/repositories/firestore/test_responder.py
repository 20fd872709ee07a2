import os
from typing import cast
from unittest import skipUnless
from unittest.mock import MagicMock, patch

import requests
from faker import Faker
from google.api_core.exceptions import RetryError
from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from unittest_parametrize import ParametrizedTestCase

from models import Role, StoreError
from repositories.firestore import FirestoreResponderRepository

FIRESTORE_DATABASE = '(default)'


@skipUnless('FIRESTORE_EMULATOR_HOST' in os.environ, 'Firestore emulator not available')
class TestResponderRepository(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()

        requests.delete(
            f'http://{os.environ["FIRESTORE_EMULATOR_HOST"]}/emulator/v1/projects/google-cloud-firestore-emulator'
            f'/databases/{FIRESTORE_DATABASE}/documents',
            timeout=5,
        )

        self.repo = FirestoreResponderRepository(FIRESTORE_DATABASE)
        self.client = FirestoreClient(database=FIRESTORE_DATABASE)

    def add_responders(self, n: int, role: Role) -> None:
        for _ in range(n):
            self.client.collection('responders').document(cast(str, self.faker.uuid4())).set(
                {'name': self.faker.name(), 'role': role.value, 'user_id': cast(str, self.faker.uuid4())}
            )

    def test_get_admins_without_limit(self) -> None:
        self.add_responders(8, Role.ADMIN)
        self.add_responders(3, Role.RESPONDER)

        admins = self.repo.get_admins()

        self.assertEqual(len(admins), 8)
        self.assertTrue(all(admin.role == Role.ADMIN.value for admin in admins))

    def test_get_admins_with_limit(self) -> None:
        self.add_responders(8, Role.ADMIN)

        self.assertEqual(len(self.repo.get_admins(5)), 5)

    def test_get_missing(self) -> None:
        self.assertIsNone(self.repo.get(cast(str, self.faker.uuid4())))


class TestResponderQuery(ParametrizedTestCase):
    def setUp(self) -> None:
        patch('google.cloud.firestore_v1.client.Client.__init__', return_value=None).start()
        self.mock_collection: MagicMock = patch('google.cloud.firestore_v1.client.Client.collection').start()
        self.addCleanup(patch.stopall)

        self.query = self.mock_collection.return_value.where.return_value
        self.query.get.return_value = []
        self.query.limit.return_value.get.return_value = []
        self.repo = FirestoreResponderRepository(FIRESTORE_DATABASE)

    def test_unlimited_query_skips_limit(self) -> None:
        self.repo.get_admins()

        self.query.limit.assert_not_called()
        self.query.get.assert_called_once_with()

    def test_limited_query(self) -> None:
        self.repo.get_admins(5)

        self.query.limit.assert_called_once_with(5)

    def test_query_failure_raises_store_error(self) -> None:
        self.query.get.side_effect = RetryError('deadline', None)

        with self.assertRaises(StoreError):
            self.repo.get_admins()
