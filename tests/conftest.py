"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so point the app at the test database first
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from bookshelf import models  # noqa: E402, F401
from bookshelf.database import Base, get_db  # noqa: E402
from bookshelf.main import app  # noqa: E402

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a user and return its credentials with the new id."""
    credentials = {"email": "reader@example.com", "password": "testpass123", "name": "Reader"}
    response = client.post("/users/register", json=credentials)
    assert response.status_code == 200
    return {**credentials, "id": response.json()["id"]}


@pytest.fixture
def owned_book(client):
    """Create a book owned by user 5."""
    response = client.post(
        "/books",
        json={"title": "Dune", "author": "Frank Herbert", "year": 1965, "ownerId": 5},
    )
    assert response.status_code == 200
    return response.json()
