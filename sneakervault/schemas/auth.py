"""Authentication and account schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from sneakervault.models.enums import GenderFilter
from sneakervault.services.passwords import MAX_PASSWORD_BYTES, password_too_long


def _check_password_bytes(value: str | None) -> str | None:
    if value is not None and password_too_long(value):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class SignupRequest(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    username: str | None = Field(None, min_length=3, max_length=50)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class LoginRequest(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    # No minimum here: a short password is just a wrong password
    password: str = Field(..., min_length=1, max_length=128)


class UserUpdateRequest(BaseModel):
    """Profile update. Omitted fields are left unchanged."""

    email: EmailStr | None = Field(None, max_length=255)
    username: str | None = Field(None, min_length=3, max_length=50)
    current_password: str | None = Field(None, max_length=128)
    new_password: str | None = Field(None, min_length=8, max_length=128)
    show_kids_shoes: bool | None = None
    gender_filter: GenderFilter | None = None

    @field_validator("new_password")
    @classmethod
    def new_password_fits_bcrypt(cls, value: str | None) -> str | None:
        return _check_password_bytes(value)


class PublicUser(BaseModel):
    """Fields of a user that are safe to show the user themselves."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str | None


class UserProfile(PublicUser):
    """User information including display preferences."""

    created_at: datetime
    show_kids_shoes: bool
    gender_filter: GenderFilter


class AuthResponse(BaseModel):
    """Signup/login response. The session itself travels in the cookie."""

    message: str
    user: PublicUser


class UserEnvelope(BaseModel):
    user: UserProfile


class UserUpdateResponse(BaseModel):
    message: str
    user: UserProfile


class MessageResponse(BaseModel):
    message: str
