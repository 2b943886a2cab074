"""
Shared fixtures: in-memory database, stub generator, authenticated users.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ALGORITHM"] = "HS256"
os.environ.setdefault("OPENAI_API_KEY", "test-key")

from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from ai_tutor.core.dependencies import get_tutor_generator
from ai_tutor.core.exceptions import GenerationError
from ai_tutor.core.security import create_access_token
from ai_tutor.db.base import SessionLocal, engine
from ai_tutor.main import app
from ai_tutor.models import Base, User

from factories import StubGenerator


@pytest.fixture
def db_session():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def generator():
    return StubGenerator()


@pytest.fixture
def client(db_session, generator):
    app.dependency_overrides[get_tutor_generator] = lambda: generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _create_user(db_session, username: str, learning_goals: Optional[str] = None) -> User:
    user = User(username=username, hashed_password="not-a-real-hash", learning_goals=learning_goals)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user(db_session):
    return _create_user(db_session, "alice")


@pytest.fixture
def other_user(db_session):
    return _create_user(db_session, "bob")


def headers_for(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


@pytest.fixture
def auth_headers(user):
    return headers_for(user)


@pytest.fixture
def other_headers(other_user):
    return headers_for(other_user)


@pytest.fixture
def fail_generation(generator):
    """Make every generation call fail like an unreachable provider."""
    generator.fail_with = GenerationError("Failed to reach generation service: timeout")
    return generator
