"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised when input violates a field constraint that pydantic models
    cannot express on their own (e.g. a body that is only whitespace).
    """

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class PermissionDeniedError(DomainError):
    """Raised when a caller is not allowed to perform an action."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TransactionConflictError(DomainError):
    """Raised when an optimistic transaction keeps losing races."""

    def __init__(self, resource: str, identifier: str, attempts: int):
        self.resource = resource
        self.identifier = identifier
        self.attempts = attempts
        super().__init__(
            f"Could not update {resource} {identifier} after {attempts} attempts"
        )
