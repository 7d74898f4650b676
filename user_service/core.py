from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from user_service.application.identity.use_cases.create_user_use_case import CreateUserUseCase
from user_service.application.identity.use_cases.list_users_use_case import ListUsersUseCase
from user_service.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from user_service.infrastructure.identity.repositories.user_repository import UserRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Identity repositories
    user_repository = providers.Factory(UserRepository, db=db)

    # Identity use cases
    list_users_use_case = providers.Factory(
        ListUsersUseCase,
        user_repository=user_repository,
    )

    create_user_use_case = providers.Factory(
        CreateUserUseCase,
        user_repository=user_repository,
    )

    update_user_use_case = providers.Factory(
        UpdateUserUseCase,
        user_repository=user_repository,
    )


# Initialize container
container = Container()
