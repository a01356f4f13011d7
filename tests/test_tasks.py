"""Tests for Celery tasks."""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

from sneakervault.models.session import AuthSession
from sneakervault.services.passwords import hash_password
from sneakervault.services.sessions import SessionManager
from sneakervault.services.users import UserRepository
from sneakervault.tasks.sessions import purge_expired_sessions


def test_purge_expired_sessions(db):
    """The task removes expired sessions and reports how many."""
    user = UserRepository(db).create_user("purge@example.com", hash_password("password123"))
    manager = SessionManager.for_db(db)
    live_token = manager.issue(user.id).token
    stale = manager.issue(user.id)
    stale.record.expires_at = datetime.now(UTC) - timedelta(hours=1)
    db.commit()

    with patch("sneakervault.database.SessionLocal", return_value=db):
        result = purge_expired_sessions.run()

    assert result == {"deleted": 1}
    remaining = db.query(AuthSession).all()
    assert [session.token for session in remaining] == [live_token]


def test_purge_with_no_sessions(db):
    with patch("sneakervault.database.SessionLocal", return_value=db):
        assert purge_expired_sessions.run() == {"deleted": 0}


def test_beat_schedule_registered():
    from sneakervault.celery_app import app

    entry = app.conf.beat_schedule["purge-expired-sessions"]
    assert entry["task"] == "sneakervault.tasks.sessions.purge_expired_sessions"
