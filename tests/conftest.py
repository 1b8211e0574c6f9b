"""Pytest configuration and fixtures."""

import os

# Tables are created below against the test engine, not at app startup
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from todo_api.database import Base, enable_sqlite_foreign_keys, get_db
from todo_api.main import app

# Use test database - PostgreSQL when DATABASE_URL points at one, SQLite otherwise
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"] + "_test"
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


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
def category(client):
    """Create a category and return its JSON."""
    response = client.post("/categories", json={"name": "Work"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_todo(client, category):
    """Factory creating todos through the API, in the default category unless told otherwise."""

    def _make_todo(**overrides):
        payload = {
            "title": "Write spec",
            "content": "Draft the first version",
            "dueDate": "2025-01-01T00:00:00Z",
            "categoryId": category["id"],
        }
        payload.update(overrides)
        response = client.post("/todos", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_todo
