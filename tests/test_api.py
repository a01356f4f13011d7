"""Authentication API tests."""

from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient

from sneakervault.main import app
from sneakervault.models.session import AuthSession
from sneakervault.services.blog import get_blog_service

COOKIE = "auth_session"


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup_sets_cookie_and_me_returns_user(client):
    """Signing up creates the user, signs them in and /me sees them."""
    response = client.post(
        "/api/signup",
        json={"email": "a@example.com", "password": "password1", "username": "abc"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == "a@example.com"
    assert data["user"]["username"] == "abc"
    assert "password" not in str(data)

    set_cookie = response.headers["set-cookie"]
    assert f"{COOKIE}=" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()
    assert "Path=/" in set_cookie
    assert "Max-Age=604800" in set_cookie

    me = client.get("/api/me")
    assert me.status_code == 200
    assert me.json()["username"] == "abc"


def test_signup_without_username(client):
    """Username is optional."""
    response = client.post("/api/signup", json={"email": "b@example.com", "password": "password1"})
    assert response.status_code == 201
    assert response.json()["user"]["username"] is None


def test_signup_duplicate_email(client, auth_user, other_client):
    """Signing up again with the same email is a conflict on the email field."""
    response = other_client.post(
        "/api/signup",
        json={"email": auth_user["email"], "password": "password123", "username": "someoneelse"},
    )
    assert response.status_code == 409
    assert response.json()["field"] == "email"


def test_signup_duplicate_username(client, auth_user, other_client):
    """Usernames are unique as well."""
    response = other_client.post(
        "/api/signup",
        json={"email": "new@example.com", "password": "password123", "username": "tester"},
    )
    assert response.status_code == 409
    assert response.json()["field"] == "username"


def test_signup_duplicate_email_and_username(client, auth_user, other_client):
    """When both are taken the email conflict is the one reported."""
    response = other_client.post(
        "/api/signup",
        json={"email": auth_user["email"], "password": "password123", "username": "tester"},
    )
    assert response.status_code == 409
    assert response.json()["field"] == "email"


def test_signup_rejects_password_bcrypt_would_truncate(client, db):
    response = client.post(
        "/api/signup", json={"email": "long@example.com", "password": "p" * 73}
    )
    assert response.status_code == 400
    assert list(response.json()["details"]) == ["password"]


def test_login_compares_every_password_byte(client, signup, other_client):
    """A password equal to the stored one in its first 72 bytes is still wrong."""
    user = signup(client, password="p" * 72)

    response = other_client.post(
        "/api/login", json={"email": user["email"], "password": "p" * 72 + "wrong"}
    )
    assert response.status_code == 401
    response = other_client.post(
        "/api/login", json={"email": user["email"], "password": "p" * 72}
    )
    assert response.status_code == 200


def test_signup_validation_errors(client, db):
    """Bad input is rejected with per-field details before anything is stored."""
    response = client.post(
        "/api/signup", json={"email": "not-an-email", "password": "short", "username": "ab"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert set(body["details"]) == {"email", "password", "username"}
    assert COOKIE not in response.cookies

    from sneakervault.models.user import User

    assert db.query(User).count() == 0


def test_signup_missing_fields(client):
    """Missing fields are reported by name."""
    response = client.post("/api/signup", json={})
    assert response.status_code == 400
    assert set(response.json()["details"]) == {"email", "password"}


def test_login(client, auth_user, other_client):
    """Logging in issues a fresh session cookie."""
    response = other_client.post(
        "/api/login", json={"email": auth_user["email"], "password": auth_user["password"]}
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == auth_user.user_id
    assert COOKIE in response.cookies
    assert other_client.get("/api/me").status_code == 200


def test_login_wrong_password_is_generic(client, auth_user, other_client):
    """Wrong password and unknown email produce the same response."""
    wrong_password = other_client.post(
        "/api/login", json={"email": auth_user["email"], "password": "wrongpass"}
    )
    unknown_email = other_client.post(
        "/api/login", json={"email": "nobody@example.com", "password": "wrongpass"}
    )
    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert COOKIE not in wrong_password.cookies


def test_multiple_sessions_per_user(client, auth_user, other_client, db):
    """Logging in on a second device leaves the first device signed in."""
    other_client.post(
        "/api/login", json={"email": auth_user["email"], "password": auth_user["password"]}
    )
    assert db.query(AuthSession).filter_by(user_id=auth_user.user_id).count() == 2
    assert client.get("/api/me").status_code == 200
    assert other_client.get("/api/me").status_code == 200


def test_login_replaces_this_browsers_session(client, auth_user, db):
    """Logging in again from the same browser does not pile up sessions."""
    client.post("/api/login", json={"email": auth_user["email"], "password": auth_user["password"]})
    assert db.query(AuthSession).filter_by(user_id=auth_user.user_id).count() == 1


def test_me_requires_session(client):
    """Anonymous /me is a 401."""
    response = client.get("/api/me")
    assert response.status_code == 401
    assert response.json()["error"] == "Not authenticated"


def test_unknown_cookie_is_rejected_and_cleared(client):
    """A made-up token is treated like no cookie at all."""
    client.cookies.set(COOKIE, "f" * 64)
    response = client.get("/api/me")
    assert response.status_code == 401
    assert response.json()["error"] == "Not authenticated"
    assert f'{COOKIE}=""' in response.headers["set-cookie"]


def test_logout(client, auth_user, db):
    """Logout deletes the session row and clears the cookie."""
    response = client.post("/api/logout")
    assert response.status_code == 200
    assert db.query(AuthSession).count() == 0
    assert client.get("/api/me").status_code == 401


def test_logout_is_idempotent(client, auth_user):
    """A second logout, now without a cookie, still succeeds."""
    assert client.post("/api/logout").status_code == 200
    assert client.post("/api/logout").status_code == 200


def test_logout_with_stale_cookie(client):
    """Logging out with a token that never existed is not an error."""
    client.cookies.set(COOKIE, "0" * 64)
    assert client.post("/api/logout").status_code == 200


def test_expired_session_is_unauthenticated_and_removed(client, auth_user, db):
    """Past-expiry sessions are refused and deleted on the failed lookup."""
    session = db.query(AuthSession).filter_by(user_id=auth_user.user_id).one()
    token = session.token
    session.expires_at = datetime.now(UTC) - timedelta(minutes=1)
    db.commit()

    response = client.get("/api/me")
    assert response.status_code == 401
    assert response.json()["error"] == "Not authenticated"
    assert db.query(AuthSession).count() == 0

    # Same answer the second time: expired sessions do not come back
    client.cookies.set(COOKIE, token)
    assert client.get("/api/me").status_code == 401


def test_get_user_profile(client, auth_user):
    """GET /api/user includes display preferences."""
    response = client.get("/api/user")
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == auth_user["email"]
    assert user["show_kids_shoes"] is False
    assert user["gender_filter"] == "both"
    assert "created_at" in user


def test_update_user_profile_fields(client, auth_user):
    """Email, username and preferences can be changed."""
    response = client.put(
        "/api/user",
        json={
            "email": "changed@example.com",
            "username": "changed",
            "show_kids_shoes": True,
            "gender_filter": "women",
        },
    )
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "changed@example.com"
    assert user["username"] == "changed"
    assert user["show_kids_shoes"] is True
    assert user["gender_filter"] == "women"


def test_update_user_to_own_values(client, auth_user):
    """Re-submitting your own email and username is not a conflict."""
    response = client.put(
        "/api/user", json={"email": auth_user["email"], "username": auth_user["username"]}
    )
    assert response.status_code == 200


def test_update_user_conflicts(client, auth_user, other_client, signup):
    """Taking another user's email or username is a 409 naming the field."""
    signup(other_client, email="other@example.com", username="other")

    response = client.put("/api/user", json={"email": "other@example.com"})
    assert response.status_code == 409
    assert response.json()["field"] == "email"

    response = client.put("/api/user", json={"username": "other"})
    assert response.status_code == 409
    assert response.json()["field"] == "username"


def test_change_password(client, auth_user, other_client):
    """The new password works for login once the current one is confirmed."""
    response = client.put(
        "/api/user",
        json={"current_password": auth_user["password"], "new_password": "brandnewpass"},
    )
    assert response.status_code == 200

    old = other_client.post(
        "/api/login", json={"email": auth_user["email"], "password": auth_user["password"]}
    )
    assert old.status_code == 401
    new = other_client.post(
        "/api/login", json={"email": auth_user["email"], "password": "brandnewpass"}
    )
    assert new.status_code == 200


def test_change_password_requires_current_password(client, auth_user):
    """Without the current password the change is rejected."""
    response = client.put("/api/user", json={"new_password": "brandnewpass"})
    assert response.status_code == 400
    assert "current_password" in response.json()["details"]

    response = client.put(
        "/api/user", json={"current_password": "not-my-password", "new_password": "brandnewpass"}
    )
    assert response.status_code == 401
    assert response.json()["field"] == "current_password"


def test_update_user_requires_session(client):
    """Anonymous profile updates are refused."""
    response = client.put("/api/user", json={"username": "ghost"})
    assert response.status_code == 401


def test_responses_are_not_cacheable(client):
    """Every response carries the no-cache headers."""
    response = client.get("/health")
    assert response.headers["cache-control"] == (
        "no-store, no-cache, must-revalidate, proxy-revalidate"
    )
    assert response.headers["pragma"] == "no-cache"
    assert response.headers["expires"] == "0"
    assert response.headers["x-content-type-options"] == "nosniff"


def test_server_errors_are_not_cacheable(client):
    """A 500 from an unexpected exception still carries the no-cache headers."""

    def broken_blog_service():
        raise RuntimeError("boom")

    app.dependency_overrides[get_blog_service] = broken_blog_service
    with TestClient(app, raise_server_exceptions=False) as raw_client:
        response = raw_client.get("/api/blog/articles")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["cache-control"] == (
        "no-store, no-cache, must-revalidate, proxy-revalidate"
    )
    assert response.headers["pragma"] == "no-cache"
    assert response.headers["expires"] == "0"
    assert response.headers["x-content-type-options"] == "nosniff"
