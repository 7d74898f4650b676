"""Identity domain layer."""

from user_service.domain.identity.entities.user import User

__all__ = [
    "User",
]
