"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users and auth headers
"""

import os

# Must be set before the application modules read their settings
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from jobly.core.database import Base, SessionLocal, engine, get_db
from jobly.core.security import create_access_token, get_password_hash
from jobly.models.job import Job
from jobly.models.user import User
from main import app


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_user(db_session, username: str, is_admin: bool = False, password: str = "password1") -> User:
    """Helper to create a user directly in the database"""
    user = User(
        username=username,
        hashed_password=get_password_hash(password),
        first_name="Test",
        last_name="User",
        email=f"{username}@example.com",
        is_admin=is_admin,
    )
    db_session.add(user)
    db_session.commit()
    return user


def auth_headers(user: User) -> dict:
    token = create_access_token(data={"sub": user.username, "is_admin": user.is_admin})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(db_session):
    return auth_headers(create_user(db_session, "admin", is_admin=True))


@pytest.fixture
def user_headers(db_session):
    return auth_headers(create_user(db_session, "u1", is_admin=False))


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "id": 1,
        "title": "Engineer",
        "salary": 100000,
        "equity": 0.1,
        "companyHandle": "acme",
    }


@pytest.fixture
def seeded_jobs(db_session):
    """Three jobs inserted directly, deliberately out of title order"""
    jobs = [
        Job(id=1, title="Software Engineer", salary=150000, equity=0.05, company_handle="c1"),
        Job(id=2, title="Accountant", salary=60000, equity=0, company_handle="c2"),
        Job(id=3, title="Data engineer", salary=None, equity=None, company_handle="c1"),
    ]
    db_session.add_all(jobs)
    db_session.commit()
    return jobs
