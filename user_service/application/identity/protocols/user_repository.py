"""Protocol for User repository in identity context."""

from typing import Protocol

from user_service.application.identity.dtos import CreateUserDTO, UpdateUserDTO
from user_service.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Protocol for User repository operations in identity context."""

    def find_all(self) -> list[User]:
        """
        Get all users.

        Returns:
            List of user entities, order unspecified

        Raises:
            StorageError: If the store is unreachable or the query fails
        """
        ...

    def create(self, data: CreateUserDTO) -> User:
        """
        Persist a new user.

        Args:
            data: Fields of the new user

        Returns:
            Created user entity with its store-assigned id

        Raises:
            StorageError: On constraint violation (e.g. duplicate email) or connectivity failure
        """
        ...

    def update(self, user_id: str, data: UpdateUserDTO) -> User | None:
        """
        Apply a partial update to a user.

        Args:
            user_id: The user id
            data: Fields to replace; unset fields are left unchanged

        Returns:
            Updated user entity, or None if no user matches user_id

        Raises:
            StorageError: For any failure other than "not found"
        """
        ...
