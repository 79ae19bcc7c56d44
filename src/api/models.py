"""Pydantic models for API request/response."""

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from domain.model.user import User

MIN_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("email must be a valid email")
    return value


def _check_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"password is required and must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return value


def _check_name(field: str, value: str) -> str:
    if len(value) < MIN_NAME_LENGTH:
        raise ValueError(
            f"{field} is required and must be at least {MIN_NAME_LENGTH} characters"
        )
    return value


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return _check_email(v)

    @field_validator('password')
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)


class CreateUserRequest(BaseModel):
    """Request model for creating (registering) a user."""
    first_name: str
    last_name: str
    email: str
    password: str

    @field_validator('first_name', 'last_name')
    @classmethod
    def names_min_length(cls, v: str, info: ValidationInfo) -> str:
        return _check_name(info.field_name, v)

    @field_validator('email')
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return _check_email(v)

    @field_validator('password')
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)


class UpdateUserRequest(BaseModel):
    """Request model for updating a user's identity fields."""
    first_name: str
    last_name: str
    email: str

    @field_validator('first_name', 'last_name')
    @classmethod
    def names_min_length(cls, v: str, info: ValidationInfo) -> str:
        return _check_name(info.field_name, v)

    @field_validator('email')
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return _check_email(v)


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never part of it."""
    id: str = Field(..., description="User ID (UUID string)")
    first_name: str
    last_name: str
    email: str
    created_by: str = Field(..., description="ID of the user who created this record")
    created_at: datetime
    updated_by: str = Field(..., description="ID of the user who last updated this record")
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> 'UserResponse':
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_by=user.created_by,
            created_at=user.created_at,
            updated_by=user.updated_by,
            updated_at=user.updated_at,
        )


UsersResponse = list[UserResponse]


class MessageResponse(BaseModel):
    """Bare acknowledgment."""
    message: str
