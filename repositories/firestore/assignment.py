import logging
from dataclasses import fields
from enum import Enum
from typing import Any, cast

import dacite
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore import Transaction, transactional
from google.cloud.firestore_v1 import DocumentReference, DocumentSnapshot

from models import Assignment, AssignmentStatus, NotFoundError, Report, StoreError
from repositories import AssignmentRepository

DACITE_CONFIG = dacite.Config(cast=[Enum], type_hooks={float: float})

REPORT_FIELDS = [field.name for field in fields(Report) if field.name != 'id']


@transactional
def update_if_status(
    transaction: Transaction, ref: DocumentReference, fields: dict[str, Any], expected_status: str
) -> None:
    snapshot = ref.get(transaction=transaction)

    if not snapshot.exists:
        raise StoreError('Failed to update assignment: assignment no longer exists')

    current = snapshot.get('status')
    if current != expected_status:
        raise StoreError(
            f'Failed to update assignment: status changed concurrently (expected {expected_status}, found {current})'
        )

    transaction.update(ref, fields)


class FirestoreAssignmentRepository(AssignmentRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def doc_to_report(self, doc: DocumentSnapshot) -> Report:
        return dacite.from_dict(
            data_class=Report,
            data={
                **cast(dict[str, Any], doc.to_dict()),
                'id': doc.id,
            },
            config=DACITE_CONFIG,
        )

    def doc_to_assignment(self, doc: DocumentSnapshot, report: Report | None) -> Assignment:
        data = cast(dict[str, Any], doc.to_dict())

        return dacite.from_dict(
            data_class=Assignment,
            data={
                **data,
                'id': doc.id,
                'status': AssignmentStatus.parse(data.get('status', '')),
                'report': report,
            },
            config=DACITE_CONFIG,
        )

    def get(self, assignment_id: str) -> Assignment:
        try:
            doc = self.db.collection('assignments').document(assignment_id).get()
        except GoogleAPIError as err:
            raise StoreError(f'Failed to fetch assignment: {err}') from err

        if not doc.exists:
            raise NotFoundError('Assignment not found')

        report_id = cast(dict[str, Any], doc.to_dict()).get('report_id')
        report = None
        if report_id:
            report = self.get_report(report_id)
            if report is None:
                self.logger.warning('Report %s linked from assignment %s not found', report_id, assignment_id)
                report = Report(id=report_id)

        return self.doc_to_assignment(doc, report)

    def get_report(self, report_id: str) -> Report | None:
        try:
            doc = self.db.collection('reports').document(report_id).get(field_paths=REPORT_FIELDS)
        except GoogleAPIError as err:
            raise StoreError(f'Failed to fetch report: {err}') from err

        if not doc.exists:
            return None

        return self.doc_to_report(doc)

    def get_responder_id(self, assignment_id: str) -> str:
        try:
            doc = self.db.collection('assignments').document(assignment_id).get(field_paths=['responder_id'])
        except GoogleAPIError as err:
            raise StoreError(f'Failed to verify assignment: {err}') from err

        if not doc.exists:
            raise NotFoundError('Assignment not found')

        return cast(str, doc.get('responder_id'))

    def update_assignment(
        self, assignment_id: str, fields: dict[str, Any], expected_status: AssignmentStatus | None = None
    ) -> None:
        ref = self.db.collection('assignments').document(assignment_id)

        try:
            if expected_status is None:
                ref.update(fields)
            else:
                update_if_status(self.db.transaction(), ref, fields, expected_status.value)
        except GoogleAPIError as err:
            raise StoreError(f'Failed to update assignment: {err}') from err

    def update_report(self, report_id: str, fields: dict[str, Any]) -> None:
        try:
            self.db.collection('reports').document(report_id).update(fields)
        except GoogleAPIError as err:
            raise StoreError(str(err)) from err
