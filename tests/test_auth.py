"""
Tests for registration, login and bearer-token authentication.
"""
from ai_tutor.core.security import create_access_token
from ai_tutor.db.init_db import DEMO_PASSWORD, DEMO_USERNAME, init_db
from ai_tutor.models import User


def test_register_login_and_me(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "carol", "password": "s3cret-pass", "learningGoals": "Pass calculus"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "carol"
    assert body["learningGoals"] == "Pass calculus"
    assert "hashedPassword" not in body

    response = client.post("/api/auth/login", data={"username": "carol", "password": "s3cret-pass"})
    assert response.status_code == 200
    token = response.json()
    assert token["tokenType"] == "bearer"

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token['accessToken']}"})
    assert response.status_code == 200
    assert response.json()["username"] == "carol"


def test_register_rejects_duplicate_username(client, user):
    response = client.post("/api/auth/register", json={"username": user.username, "password": "another-pass"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Username already exists"


def test_login_rejects_wrong_password(client):
    client.post("/api/auth/register", json={"username": "dave", "password": "right-pass"})

    response = client.post("/api/auth/login", data={"username": "dave", "password": "wrong-pass"})

    assert response.status_code == 401


def test_invalid_token_is_unauthorized(client):
    response = client.get("/api/topics", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_token_for_missing_user_is_unauthorized(client, db_session):
    token = create_access_token("999")

    response = client.get("/api/topics", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_seeded_demo_user_can_log_in(client, db_session):
    init_db(db_session)
    init_db(db_session)

    assert db_session.query(User).filter(User.username == DEMO_USERNAME).count() == 1
    response = client.post("/api/auth/login", data={"username": DEMO_USERNAME, "password": DEMO_PASSWORD})

    assert response.status_code == 200
    assert response.json()["accessToken"]
