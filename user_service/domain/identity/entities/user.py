"""User entity for identity management."""

from dataclasses import dataclass


@dataclass
class User:
    """
    User entity as seen by the rest of the application.

    Business Rules:
    - The id is assigned by the persistence layer and is always a string
    - Email is intended to be unique (enforced only by the database, if at all)
    - Name is optional
    """

    id: str
    email: str
    name: str | None = None

    @classmethod
    def create_with_id(cls, id: str, email: str, name: str | None) -> "User":
        """
        Reconstitute a user from persistence.

        Args:
            id: Identifier assigned by the store
            email: User's email address
            name: User's display name (or None)

        Returns:
            Reconstituted User instance
        """
        return cls(id=id, email=email, name=name)
