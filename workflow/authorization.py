from models import AuthorizationError
from repositories import AssignmentRepository


def authorize(assignment_repo: AssignmentRepository, assignment_id: str, responder_id: str) -> None:
    if assignment_repo.get_responder_id(assignment_id) != responder_id:
        raise AuthorizationError('Responder is not authorized to update this assignment')
