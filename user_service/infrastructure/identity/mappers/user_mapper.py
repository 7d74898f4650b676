"""Mapper for User ORM ↔ Domain conversion."""

from typing import Any

from user_service.application.identity.dtos import CreateUserDTO
from user_service.domain.identity.entities.user import User
from user_service.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity. The id always leaves as a string."""
        return User.create_with_id(
            id=str(orm_model.id),
            email=orm_model.email,
            name=orm_model.name,
        )

    def to_orm(self, data: CreateUserDTO) -> UserORM:
        """Build a new ORM model from creation data."""
        return UserORM(email=data.email, name=data.name)

    def apply_changes(self, orm_model: UserORM, changes: dict[str, Any]) -> UserORM:
        """Copy provided fields onto an existing ORM model."""
        for field, value in changes.items():
            setattr(orm_model, field, value)
        return orm_model
