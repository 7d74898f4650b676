"""Custom exception hierarchy for the user service."""


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class StorageError(UserServiceError):
    """
    Failure originating below the repository layer.

    Covers connectivity problems, constraint violations and malformed
    queries. The underlying driver/ORM exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize with the failing repository operation and optional reason."""
        self.operation = operation
        self.reason = reason
        if reason:
            super().__init__(f"Storage failure during {operation}: {reason}")
        else:
            super().__init__(f"Storage failure during {operation}")
