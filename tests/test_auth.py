"""Tests for registration, login and logout."""
from datetime import datetime, timedelta

from befit.db import db
from befit.models import User


def _register(client, email="anna@example.com", password="geheim123"):
    return client.post("/auth/register", data={"email": email, "password": password})


def test_register_creates_user_and_logs_in(client):
    response = _register(client)

    assert response.status_code == 302
    user = db.session.execute(db.select(User)).scalar_one()
    assert user.email == "anna@example.com"
    assert user.password_hash != "geheim123"
    assert user.created_at.tzinfo is None
    assert abs(datetime.now() - user.created_at) < timedelta(minutes=1)
    with client.session_transaction() as sess:
        assert sess["user_id"] == user.id


def test_register_rejects_short_password(client):
    assert _register(client, password="kurz").status_code == 400


def test_register_rejects_duplicate_email(client):
    _register(client)
    client.post("/auth/logout")

    assert _register(client, email="ANNA@example.com").status_code == 400


def test_login_with_valid_credentials(client):
    _register(client)
    client.post("/auth/logout")

    response = client.post("/auth/login", data={"email": "anna@example.com", "password": "geheim123"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/sessions/")


def test_login_redirects_to_next(client):
    _register(client)
    client.post("/auth/logout")

    response = client.post(
        "/auth/login?next=/stats/",
        data={"email": "anna@example.com", "password": "geheim123"},
    )

    assert response.headers["Location"].endswith("/stats/")


def test_login_ignores_external_next(client):
    _register(client)
    client.post("/auth/logout")

    response = client.post(
        "/auth/login?next=//evil.example.com/",
        data={"email": "anna@example.com", "password": "geheim123"},
    )

    assert "evil" not in response.headers["Location"]


def test_login_with_wrong_password(client):
    _register(client)
    client.post("/auth/logout")

    response = client.post("/auth/login", data={"email": "anna@example.com", "password": "falsch!!"})

    assert response.status_code == 401


def test_logout_clears_session(client):
    _register(client)

    client.post("/auth/logout")

    assert client.get("/sessions/").status_code == 302
