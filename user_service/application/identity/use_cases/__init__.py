from .create_user_use_case import CreateUserUseCase
from .list_users_use_case import ListUsersUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
]
