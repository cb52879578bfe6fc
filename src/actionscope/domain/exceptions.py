"""Domain exceptions."""


class ActionScopeError(Exception):
    """Base exception for ActionScope."""

    pass


class PermissionDenied(ActionScopeError):
    """Actor does not have permission for the requested operation."""

    pass


class NotFound(ActionScopeError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        message = f"{resource} not found" if identifier is None else f"{resource} {identifier} not found"
        super().__init__(message)


class ValidationError(ActionScopeError):
    """Validation failed for input data."""

    pass


class InvalidStatusTransition(ValidationError):
    """Target status is not in the actor's allowed transitions."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Invalid status transition {current} -> {target}")
