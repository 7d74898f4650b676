"""API routes for user management."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_service.application.identity.dtos import CreateUserDTO, UpdateUserDTO
from user_service.application.identity.use_cases.create_user_use_case import CreateUserUseCase
from user_service.application.identity.use_cases.list_users_use_case import ListUsersUseCase
from user_service.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from user_service.core import container
from user_service.domain.identity.entities.user import User
from user_service.infrastructure.common.di import inject_use_case
from user_service.infrastructure.identity.schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

INTERNAL_ERROR_MESSAGE = "Internal server error."
USER_NOT_FOUND_MESSAGE = "User not found."


def _to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, email=user.email, name=user.name)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "",
    response_model=list[UserResponse],
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
)
def list_users(
    use_case: ListUsersUseCase = Depends(inject_use_case(container.list_users_use_case)),
) -> list[UserResponse] | JSONResponse:
    """Get all users."""
    try:
        users = use_case.execute()
    except Exception as e:
        logger.error(f"Failed to list users: {e!s}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    return [_to_response(user) for user in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorResponse}},
)
def create_user(
    request: UserCreateRequest,
    use_case: CreateUserUseCase = Depends(inject_use_case(container.create_user_use_case)),
) -> UserResponse | JSONResponse:
    """
    Create a user.

    The body is passed through as-is; there is no uniqueness or format check,
    so a duplicate email surfaces as a storage failure (500).
    """
    try:
        user = use_case.execute(CreateUserDTO(email=request.email, name=request.name))
    except Exception as e:
        logger.error(f"Failed to create user: {e!s}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    return _to_response(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def update_user(
    user_id: str,
    request: UserUpdateRequest,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserResponse | JSONResponse:
    """
    Update a user's email and/or name.

    Only fields present in the body are changed; `"name": null` clears the name.
    """
    data = UpdateUserDTO(**request.model_dump(include=request.model_fields_set))
    try:
        user = use_case.execute(user_id, data)
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {e!s}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    if user is None:
        return _error(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND_MESSAGE)
    return _to_response(user)
