from collections.abc import Awaitable, Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from user_service.core import container
from user_service.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.db override with request-scoped database session.
    The dependency is a coroutine so override, build and reset run on the event
    loop without interleaving with another request.
    """

    async def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            # Reset override after the use case has been built
            container.db.reset_override()

    return dependency
