"""DTOs for user use cases."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Final


class _Unset(Enum):
    """Marker for a field that was not provided in a partial update."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset.UNSET


@dataclass(frozen=True)
class CreateUserDTO:
    """DTO for creating a user. Passed to the repository as-is."""

    email: str
    name: str | None = None


@dataclass(frozen=True)
class UpdateUserDTO:
    """
    DTO for a partial user update.

    A field left as ``UNSET`` means "leave unchanged"; ``name=None`` means
    "clear the name".
    """

    email: str | _Unset = UNSET
    name: str | None | _Unset = UNSET

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not UNSET
        }
