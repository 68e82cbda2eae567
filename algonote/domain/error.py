"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when a member attempts to change content they did not write."""

    def __init__(self, resource: str, resource_id: str, member_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.member_id = member_id
        super().__init__(
            f"Member {member_id} is not the writer of {resource} {resource_id}"
        )


class ContentError(DomainError):
    """Raised when body text is missing or blank."""

    def __init__(self, message: str = "Content text must not be null or blank"):
        super().__init__(message)


class TagConflictError(DomainError):
    """Raised when a tag with the same name was created concurrently.

    Only the tag registry should ever see this error: it recovers by
    fetching the row that won the race.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tag already exists: {name}")


class TagNameError(DomainError):
    """Raised when a parsed tag name cannot be stored, e.g. it is too long."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid tag name {name!r}: {reason}")
