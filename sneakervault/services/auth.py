"""Account flows: signup, login and profile updates."""

import logging

from sneakervault.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    ValidationFailed,
)
from sneakervault.models.user import User
from sneakervault.schemas.auth import SignupRequest, UserUpdateRequest
from sneakervault.services.passwords import hash_password, pwd_context, verify_password
from sneakervault.services.users import UserRepository

logger = logging.getLogger(__name__)


def authenticate_user(users: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password fail identically, including in timing.
    """
    user = users.find_by_email(email)
    if user is None:
        pwd_context.dummy_verify()
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def register_user(users: UserRepository, data: SignupRequest) -> User:
    """Create an account. Usernames, when given, must be unique too.

    A taken email is reported ahead of a taken username.
    """
    if users.find_by_email(data.email):
        raise DuplicateEmailError()
    if data.username and users.find_by_username(data.username):
        raise DuplicateUsernameError()
    user = users.create_user(
        email=data.email,
        password_hash=hash_password(data.password),
        username=data.username,
    )
    logger.info(f"User {user.id} signed up")
    return user


def update_account(users: UserRepository, user: User, data: UserUpdateRequest) -> User:
    """Apply a profile update for ``user``.

    Changing the password requires the current one.
    """
    fields = data.model_dump(
        exclude_unset=True,
        exclude_none=True,
        exclude={"current_password", "new_password"},
    )
    if "gender_filter" in fields:
        fields["gender_filter"] = data.gender_filter.value

    if data.new_password:
        if not data.current_password:
            raise ValidationFailed(
                {"current_password": ["Current password is required to set a new password"]}
            )
        if not verify_password(data.current_password, user.password_hash):
            raise InvalidCredentialsError(
                "Current password is incorrect", field="current_password"
            )
        fields["password_hash"] = hash_password(data.new_password)

    updated = users.update_user(user.id, **fields)
    if "password_hash" in fields:
        logger.info(f"User {user.id} changed their password")
    return updated
