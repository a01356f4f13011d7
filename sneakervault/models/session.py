"""Auth session model."""

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from sneakervault.database import Base
from sneakervault.models.mixins import UUIDPrimaryKeyMixin


class AuthSession(Base, UUIDPrimaryKeyMixin):
    """A server-side login session.

    The cookie carries ``token``, never ``id``. Rows are inserted on login and
    deleted on logout or when found expired; ``expires_at`` is fixed at insert.
    """

    __tablename__ = "sessions"

    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token = Column(String(64), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="sessions")
