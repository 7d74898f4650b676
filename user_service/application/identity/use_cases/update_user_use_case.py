"""Use case for updating users."""

import structlog

from user_service.application.identity.dtos import UpdateUserDTO
from user_service.application.identity.protocols.user_repository import UserRepositoryProtocol
from user_service.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class UpdateUserUseCase:
    """Use case for updating users."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def execute(self, user_id: str, data: UpdateUserDTO) -> User | None:
        """
        Apply a partial update to a user.

        Args:
            user_id: ID of the user to update
            data: Fields to replace

        Returns:
            Updated user entity, or None if the user does not exist

        Raises:
            StorageError: Propagated unchanged from the repository
        """
        user = self.user_repository.update(user_id, data)

        if user is None:
            logger.info("user_not_found_for_update", user_id=user_id)
        else:
            logger.info("updated_user", user_id=user_id)
        return user
