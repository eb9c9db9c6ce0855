"""Pytest configuration and fixtures."""

import os

# Must be in place before wordrecall settings are first read
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from wordrecall import models
from wordrecall.core import container
from wordrecall.database import Base, build_engine, get_db
from wordrecall.infrastructure.identity.services.password_service import hash_password
from wordrecall.infrastructure.identity.services.token_service import create_access_token
from wordrecall.main import app

TEST_PASSWORD = "correct-horse-battery"

# In-memory SQLite with foreign keys on, so word rows cascade with their list
test_engine = build_engine("sqlite:///:memory:")

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def reset_stores() -> Generator[None, None, None]:
    """Give every test empty session and results stores."""
    container.study_session_store.reset()
    container.results_store.reset()
    yield
    container.study_session_store.reset()
    container.results_store.reset()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _create_user(db_session: Session, email: str, name: str | None) -> models.User:
    user = models.User(email=email, name=name, hashed_password=hash_password(TEST_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    return _create_user(db_session, "alice@example.com", "Alice")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    return _create_user(db_session, "bob@example.com", None)


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def other_auth_headers(other_user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture
def test_word_list(db_session: Session, test_user: models.User) -> models.WordList:
    """A three-word list owned by test_user, stored in insertion order."""
    word_list = models.WordList(
        user_id=test_user.id,
        name="Fruit",
        words=[
            models.Word(word="CHERRY", definition="small and red", position=0),
            models.Word(word="APPLE", definition="keeps the doctor away", position=1),
            models.Word(word="BANANA", definition=None, position=2),
        ],
    )
    db_session.add(word_list)
    db_session.commit()
    db_session.refresh(word_list)
    return word_list
