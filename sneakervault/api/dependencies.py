"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from sneakervault.config import get_settings
from sneakervault.database import get_db
from sneakervault.exceptions import NotAuthenticatedError
from sneakervault.models.user import User
from sneakervault.services.collection import CollectionService
from sneakervault.services.sessions import SessionManager, SessionStore
from sneakervault.services.users import UserRepository

settings = get_settings()


def session_token(request: Request) -> str | None:
    """The raw session cookie value, if any."""
    return request.cookies.get(settings.session_cookie_name) or None


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
) -> UserRepository:
    """Get user repository bound to the request's database session."""
    return UserRepository(db)


def get_session_manager(
    db: Annotated[Session, Depends(get_db)],
) -> SessionManager:
    """Get session manager bound to the request's database session."""
    return SessionManager(SessionStore(db), UserRepository(db))


def get_current_user(
    request: Request,
    manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> User:
    """Get the current authenticated user from the session cookie."""
    resolution = manager.resolve_state(session_token(request))
    if not resolution.is_valid:
        raise NotAuthenticatedError(clear_cookie=resolution.had_cookie)
    return resolution.user


def get_collection_service(
    db: Annotated[Session, Depends(get_db)],
) -> CollectionService:
    """Get collection service with dependencies."""
    return CollectionService(db)
