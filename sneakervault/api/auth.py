"""Authentication and account API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

from sneakervault.api.dependencies import (
    get_current_user,
    get_session_manager,
    get_user_repository,
    session_token,
)
from sneakervault.api.guard import clear_session_cookie, set_session_cookie
from sneakervault.models.user import User
from sneakervault.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PublicUser,
    SignupRequest,
    UserEnvelope,
    UserProfile,
    UserUpdateRequest,
    UserUpdateResponse,
)
from sneakervault.services.auth import authenticate_user, register_user, update_account
from sneakervault.services.sessions import SessionManager
from sneakervault.services.users import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    data: SignupRequest,
    response: Response,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """Register a new user and sign them in."""
    user = register_user(users, data)

    # The account is committed at this point; if the session can't be stored
    # the user simply logs in afterwards.
    try:
        issued = manager.issue(user.id)
    except SQLAlchemyError:
        logger.exception(f"Could not issue session for new user {user.id}")
        users.db.rollback()
        return AuthResponse(
            message="User created successfully, please log in",
            user=PublicUser.model_validate(user),
        )

    set_session_cookie(response, issued.token)
    return AuthResponse(message="User created successfully", user=PublicUser.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    request: Request,
    response: Response,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """Login with email and password."""
    user = authenticate_user(users, credentials.email, credentials.password)

    # Replace this browser's previous session; other devices keep theirs
    manager.revoke(session_token(request))
    issued = manager.issue(user.id)
    set_session_cookie(response, issued.token)
    logger.info(f"User {user.id} logged in")

    return AuthResponse(message="Login successful", user=PublicUser.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """Logout. Succeeds whether or not a session was present."""
    manager.revoke(session_token(request))
    clear_session_cookie(response)
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=PublicUser)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.get("/user", response_model=UserEnvelope)
def get_user(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user including display preferences."""
    return UserEnvelope(user=UserProfile.model_validate(current_user))


@router.put("/user", response_model=UserUpdateResponse)
def update_user(
    data: UserUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Update the current user's profile, password or preferences."""
    user = update_account(users, current_user, data)
    return UserUpdateResponse(
        message="User updated successfully", user=UserProfile.model_validate(user)
    )
