"""User repository."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sneakervault.exceptions import DuplicateEmailError, DuplicateUsernameError, NotFoundError
from sneakervault.models.user import User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {"email", "username", "password_hash", "show_kids_shoes", "gender_filter"}
)


class UserRepository:
    """Single-row reads and writes of user records."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, email: str, password_hash: str, username: str | None = None) -> User:
        """Create a new user.

        The existence check only gives a nicer error; the unique constraint on
        ``users.email`` decides the race between two concurrent signups.
        """
        if self.find_by_email(email):
            raise DuplicateEmailError()

        user = User(email=email, username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise self._duplicate_error(email=email, username=username) from None
        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def update_user(self, user_id: str, **fields: Any) -> User:
        """Update profile fields.

        Setting a unique field to the user's own current value is not a conflict.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        email = fields.get("email")
        if email is not None and email != user.email:
            other = self.find_by_email(email)
            if other is not None and other.id != user.id:
                raise DuplicateEmailError()

        username = fields.get("username")
        if username is not None and username != user.username:
            other = self.find_by_username(username)
            if other is not None and other.id != user.id:
                raise DuplicateUsernameError()

        for name, value in fields.items():
            setattr(user, name, value)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise self._duplicate_error(email=email, username=username) from None
        self.db.refresh(user)
        return user

    def _duplicate_error(
        self, email: str | None, username: str | None
    ) -> DuplicateEmailError | DuplicateUsernameError:
        """Work out which unique constraint a failed write tripped."""
        if email is not None and self.find_by_email(email) is not None:
            return DuplicateEmailError()
        if username is not None and self.find_by_username(username) is not None:
            return DuplicateUsernameError()
        # Lost a race on a row that has since gone away; email is the likelier culprit
        return DuplicateEmailError()
