"""Domain exceptions."""


class AgencyRBACError(Exception):
    """Base exception for Agency RBAC."""

    pass


class PermissionDenied(AgencyRBACError):
    """Actor is not allowed to perform the requested action."""

    pass


class NotFound(AgencyRBACError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        message = f"{resource} not found" if identifier is None else f"{resource} {identifier} not found"
        super().__init__(message)


class ValidationError(AgencyRBACError):
    """Validation failed for input data."""

    pass


class LookupFailed(AgencyRBACError):
    """Backing store could not answer a read."""

    pass
