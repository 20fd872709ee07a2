from typing import Any

from models import Assignment, AssignmentStatus, Report


class AssignmentRepository:
    def get(self, assignment_id: str) -> Assignment:
        raise NotImplementedError  # pragma: no cover

    def get_responder_id(self, assignment_id: str) -> str:
        raise NotImplementedError  # pragma: no cover

    def get_report(self, report_id: str) -> Report | None:
        raise NotImplementedError  # pragma: no cover

    def update_assignment(
        self, assignment_id: str, fields: dict[str, Any], expected_status: AssignmentStatus | None = None
    ) -> None:
        raise NotImplementedError  # pragma: no cover

    def update_report(self, report_id: str, fields: dict[str, Any]) -> None:
        raise NotImplementedError  # pragma: no cover
