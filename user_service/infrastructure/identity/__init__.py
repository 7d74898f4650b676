"""Identity infrastructure layer."""

from user_service.infrastructure.identity.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
]
