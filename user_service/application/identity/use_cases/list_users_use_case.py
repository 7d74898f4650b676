"""Use case for listing users."""

import structlog

from user_service.application.identity.protocols.user_repository import UserRepositoryProtocol
from user_service.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class ListUsersUseCase:
    """Use case for listing users."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def execute(self) -> list[User]:
        """
        Get all users.

        Returns:
            List of user entities as returned by the repository

        Raises:
            StorageError: Propagated unchanged from the repository
        """
        users = self.user_repository.find_all()

        logger.debug("listed_users", count=len(users))
        return users
