"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_service.application.identity.dtos import CreateUserDTO, UpdateUserDTO
from user_service.domain.identity.entities.user import User
from user_service.exceptions import StorageError
from user_service.infrastructure.identity.mappers.user_mapper import UserMapper
from user_service.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_all(self) -> list[User]:
        """
        Get all users.

        Returns:
            List of user entities ordered by id

        Raises:
            StorageError: If the query fails
        """
        stmt = select(UserORM).order_by(UserORM.id)
        try:
            orm_models = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to list users: {e!s}")
            raise StorageError("find_all", str(e)) from e
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def create(self, data: CreateUserDTO) -> User:
        """
        Create a user.

        Args:
            data: Fields of the new user

        Returns:
            Created user entity with database-generated id

        Raises:
            StorageError: On constraint violation (e.g. duplicate email) or connectivity failure
        """
        orm_model = self.mapper.to_orm(data)
        try:
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create user with email {data.email}: {e!s}")
            raise StorageError("create", str(e)) from e
        logger.info(f"Created user with email: {data.email} (id={orm_model.id})")
        return self.mapper.to_domain(orm_model)

    def update(self, user_id: str, data: UpdateUserDTO) -> User | None:
        """
        Apply a partial update to a user.

        Args:
            user_id: The user id as a string
            data: Fields to replace; unset fields are left unchanged

        Returns:
            Updated user entity, or None if no user matches user_id

        Raises:
            StorageError: For any failure other than "not found"
        """
        key = _parse_key(user_id)
        if key is None:
            # Ids that can't be a primary key can't match a row
            return None

        try:
            orm_model = self.db.get(UserORM, key)
            if not orm_model:
                return None
            self.mapper.apply_changes(orm_model, data.changes())
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update user {user_id}: {e!s}")
            raise StorageError("update", str(e)) from e
        logger.info(f"Updated user {user_id}")
        return self.mapper.to_domain(orm_model)


# Largest value of the signed 64-bit integer primary key
_MAX_KEY = 2**63 - 1


def _parse_key(user_id: str) -> int | None:
    """
    Coerce a string id to the integer primary key, or None if it isn't one.

    Only the canonical form produced by the mapper (plain ASCII digits, no
    sign, padding, separators or leading zeros) is accepted, and only within
    the key's range.
    """
    if not (user_id.isascii() and user_id.isdigit()):
        return None
    key = int(user_id)
    if str(key) != user_id or key > _MAX_KEY:
        return None
    return key
