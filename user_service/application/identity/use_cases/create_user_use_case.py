"""Use case for creating users."""

import structlog

from user_service.application.identity.dtos import CreateUserDTO
from user_service.application.identity.protocols.user_repository import UserRepositoryProtocol
from user_service.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class CreateUserUseCase:
    """
    Use case for creating users.

    No business validation runs here. Email format and uniqueness checks,
    if ever needed, belong in execute() before the repository call.
    """

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def execute(self, data: CreateUserDTO) -> User:
        """
        Create a new user.

        Args:
            data: Fields of the new user, passed to the repository unchanged

        Returns:
            Created user entity

        Raises:
            StorageError: Propagated unchanged from the repository
        """
        user = self.user_repository.create(data)

        logger.info("created_user", user_id=user.id)
        return user
