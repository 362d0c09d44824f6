import pytest
from sqlalchemy import func, select

from gamerverse.models.user import User
from tests.helpers import login, signup


def _user_count(client):
    with client.app.state.database.session() as session:
        return session.execute(select(func.count(User.id))).scalar_one()


def test_signup_creates_user_and_session(client):
    user_id = signup(client)

    assert _user_count(client) == 1
    response = client.get("/api/profile")
    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["id"] == user_id
    assert profile["email"] == "alice@example.com"
    assert profile["level"] == 1


def test_signup_never_stores_plaintext_password(client):
    user_id = signup(client, password="plain-text-pw")

    with client.app.state.database.session() as session:
        stored = session.get(User, user_id).password_hash
    assert stored != "plain-text-pw"
    assert stored.startswith("$2")


@pytest.mark.parametrize(
    "body",
    [
        {"email": "a@example.com", "password": "pw"},
        {"name": "A", "password": "pw"},
        {"name": "A", "email": "a@example.com"},
        {"name": "", "email": "a@example.com", "password": "pw"},
        {},
    ],
)
def test_signup_missing_fields(client, body):
    response = client.post("/api/signup", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing fields"}
    assert _user_count(client) == 0


def test_signup_without_body(client):
    response = client.post("/api/signup")
    assert response.status_code == 400


def test_signup_duplicate_email_conflicts(client):
    first_id = signup(client, name="Alice", password="first-pass")

    response = client.post(
        "/api/signup",
        json={"name": "Mallory", "email": "alice@example.com", "password": "other-pass"},
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Email already exists"}
    assert _user_count(client) == 1
    # first row untouched
    assert login(client, password="first-pass") == first_id
    assert client.get("/api/profile").json()["profile"]["name"] == "Alice"


def test_email_match_is_case_sensitive(client):
    signup(client, email="alice@example.com")
    other_id = signup(client, name="Other", email="Alice@Example.com")

    assert _user_count(client) == 2
    assert login(client, email="Alice@Example.com") == other_id


def test_login_returns_user_echo(client):
    user_id = signup(client)
    client.post("/api/logout")

    response = client.post("/api/login", json={"email": "alice@example.com", "password": "s3cret-pass"})

    assert response.status_code == 200
    assert response.json() == {"ok": True, "userId": user_id, "name": "Alice", "email": "alice@example.com"}
    assert client.get("/api/profile").status_code == 200


def test_login_failures_are_indistinguishable(client):
    signup(client)
    client.post("/api/logout")

    wrong_password = client.post("/api/login", json={"email": "alice@example.com", "password": "nope"})
    unknown_email = client.post("/api/login", json={"email": "bob@example.com", "password": "nope"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}
    assert client.get("/api/profile").status_code == 401


def test_login_missing_fields(client):
    response = client.post("/api/login", json={"email": "alice@example.com"})
    assert response.status_code == 400


def test_logout_without_session_succeeds(client):
    response = client.post("/api/logout")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_logout_invalidates_session(client):
    signup(client)
    token = client.cookies.get("gv_session")

    assert client.post("/api/logout").json() == {"ok": True}
    assert client.get("/api/profile").status_code == 401
    # the old token is dead server-side too
    client.cookies.set("gv_session", token)
    assert client.get("/api/profile").status_code == 401
    # and a second logout is still fine
    assert client.post("/api/logout").json() == {"ok": True}


def test_login_replaces_previous_session(client):
    signup(client)
    old_token = client.cookies.get("gv_session")

    login(client)

    assert client.cookies.get("gv_session") != old_token
    assert client.app.state.sessions.resolve(old_token) is None


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/profile"),
        ("post", "/api/profile/update"),
        ("post", "/api/collection"),
        ("get", "/api/collection"),
        ("delete", "/api/collection/1"),
        ("post", "/api/wishlist"),
        ("get", "/api/wishlist"),
        ("delete", "/api/wishlist/1"),
        ("get", "/api/stats"),
    ],
)
def test_protected_routes_require_session(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_unknown_token_is_unauthorized(client):
    client.cookies.set("gv_session", "not-a-real-token")
    assert client.get("/api/stats").status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_signup_with_malformed_json_is_bad_request(client):
    response = client.post("/api/signup", content=b"{not json", headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}
