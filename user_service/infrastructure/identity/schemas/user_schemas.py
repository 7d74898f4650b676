from pydantic import BaseModel, Field, field_validator


class UserResponse(BaseModel):
    """Schema for returning a user."""

    id: str = Field(..., description="User id")
    email: str = Field(..., description="User email address")
    name: str | None = Field(None, description="User display name")


class UserCreateRequest(BaseModel):
    """Schema for creating a user."""

    email: str = Field(..., description="Email address of the new user")
    name: str | None = Field(None, description="Display name of the new user")


class UserUpdateRequest(BaseModel):
    """Schema for a partial user update. Omitted fields are left unchanged."""

    email: str | None = Field(None, description="New email address")
    name: str | None = Field(None, description="New display name (null clears it)")

    @field_validator("email", mode="after")
    @classmethod
    def reject_null_email(cls, value: str | None) -> str | None:
        """Email may be omitted but not set to null."""
        if value is None:
            raise ValueError("email cannot be null")
        return value


class ErrorResponse(BaseModel):
    """Schema for error bodies."""

    error: str = Field(..., description="Error message")
