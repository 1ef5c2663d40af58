"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or insufficient input."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when a mutating operation has no authenticated requester."""

    def __init__(self, action: str):
        super().__init__(f"Authentication required to {action}")


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own.

    The message is intentionally generic; details go to the logs only.
    """

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"You can only modify your own {resource}s")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DepthExceededError(DomainError):
    """Raised when a reply would nest deeper than allowed."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Maximum reply depth exceeded: a reply would be at depth {depth}, "
            f"maximum depth is {max_depth}"
        )


class InvalidStateError(DomainError):
    """Raised when operating on content in a terminal (deleted) state."""

    def __init__(self, resource: str, resource_id: str, action: str = "modify"):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Cannot {action} deleted {resource} {resource_id}")


class ConflictError(DomainError):
    """Raised when a record changed between read and write."""

    def __init__(self, resource: str, resource_id: str, expected_version: int):
        self.resource = resource
        self.resource_id = resource_id
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {resource_id} was modified concurrently "
            f"(expected version {expected_version})"
        )


class StoreUnavailableError(DomainError):
    """Raised when the database or attachment store fails."""

    def __init__(self, store: str, operation: str, reason: str = ""):
        self.store = store
        self.operation = operation
        message = f"{store} unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
