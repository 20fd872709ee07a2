class ServiceError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    pass


class NotFoundError(ServiceError):
    pass


class InvalidStateError(ServiceError):
    """Raised when a stored status is not part of the assignment lifecycle."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f'Invalid current status: {status}')


class IllegalTransitionError(ServiceError):
    def __init__(self, current: str, target: str, allowed: list[str]) -> None:
        self.current = current
        self.target = target
        self.allowed = allowed
        super().__init__(
            f'Invalid status transition from {current} to {target}. Allowed transitions: {", ".join(allowed)}'
        )


class AuthorizationError(ServiceError):
    pass


class StoreError(ServiceError):
    status_code = 500


class TransactionError(StoreError):
    """
    The report write failed after the assignment write succeeded.

    `rolled_back` is False when the compensating write also failed, in which case the assignment
    keeps the new status while the report does not reflect it.
    """

    def __init__(self, message: str, *, rolled_back: bool) -> None:
        self.rolled_back = rolled_back
        super().__init__(message)
