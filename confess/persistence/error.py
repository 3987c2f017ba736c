"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StorageError(PersistenceError):
    """The backing store failed (connectivity loss, rejected statement, ...).

    The message is meant for server-side logs, not for clients.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Storage failure during {operation}: {cause}")
