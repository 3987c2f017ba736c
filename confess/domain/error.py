"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Required input missing or malformed."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidReactionError(DomainError):
    """Raised when a reaction type is outside the supported set."""

    def __init__(self, reaction_type: str):
        self.reaction_type = reaction_type
        super().__init__(f"Invalid reaction type: {reaction_type}")


class DuplicateReactionError(DomainError):
    """Raised when a user reacts to the same confession a second time."""

    def __init__(self, confession_id: str, user_id: str):
        self.confession_id = confession_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} has already reacted to confession {confession_id}"
        )
