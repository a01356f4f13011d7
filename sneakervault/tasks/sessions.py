"""Celery tasks for session housekeeping."""

import logging

from sneakervault.celery_app import app as celery_app
from sneakervault.database import session_scope
from sneakervault.services.sessions import SessionManager

logger = logging.getLogger(__name__)


@celery_app.task
def purge_expired_sessions() -> dict:
    """Delete sessions past their expiry.

    Runs hourly via celery-beat. Expired sessions are also removed when a
    request presents one; this catches the ones nobody presents again.

    Returns:
        dict with the number of deleted sessions
    """
    with session_scope() as db:
        deleted = SessionManager.for_db(db).purge_expired()
    logger.info(f"Purged {deleted} expired sessions")
    return {"deleted": deleted}
