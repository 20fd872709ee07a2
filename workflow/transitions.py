"""Assignment lifecycle: assigned -> accepted -> enroute -> on_scene -> resolved."""

from models import AssignmentStatus, IllegalTransitionError, LifecycleStatus

SUCCESSOR: dict[AssignmentStatus, AssignmentStatus | None] = {
    AssignmentStatus.ASSIGNED: AssignmentStatus.ACCEPTED,
    AssignmentStatus.ACCEPTED: AssignmentStatus.ENROUTE,
    AssignmentStatus.ENROUTE: AssignmentStatus.ON_SCENE,
    AssignmentStatus.ON_SCENE: AssignmentStatus.RESOLVED,
    AssignmentStatus.RESOLVED: None,
}

LIFECYCLE: dict[AssignmentStatus, LifecycleStatus] = {
    AssignmentStatus.ACCEPTED: LifecycleStatus.ACCEPTED,
    AssignmentStatus.ENROUTE: LifecycleStatus.ENROUTE,
    AssignmentStatus.ON_SCENE: LifecycleStatus.ON_SCENE,
    AssignmentStatus.RESOLVED: LifecycleStatus.RESOLVED,
}


def allowed(current: AssignmentStatus | str) -> frozenset[AssignmentStatus]:
    status = AssignmentStatus.parse(current)
    successor = SUCCESSOR[status]
    return frozenset() if successor is None else frozenset({successor})


def is_legal(current: AssignmentStatus | str, target: AssignmentStatus | str) -> bool:
    return target in allowed(current)


def ensure_legal(current: AssignmentStatus | str, target: AssignmentStatus | str) -> None:
    legal = allowed(current)

    if target not in legal:
        raise IllegalTransitionError(str(current), str(target), sorted(status.value for status in legal))


def lifecycle_for(target: AssignmentStatus) -> LifecycleStatus:
    return LIFECYCLE[target]
