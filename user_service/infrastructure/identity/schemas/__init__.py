"""Identity context schemas."""

from user_service.infrastructure.identity.schemas.user_schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
