"""Pytest configuration and fixtures."""
import os

# Point the app at a throwaway SQLite file before importing app modules
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_config_service.db"
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
import pytest
from config_service.core.database import Base, get_db, make_engine
from config_service.main import app

# Setup temporary database for testing (foreign keys on, so cascades work)
engine = make_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing."""
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


# Override dependency
app.dependency_overrides[get_db] = override_get_db

# Create test client
client = TestClient(app=app)


# Setup: Create and drop tables for clean testing environment
@pytest.fixture(scope="module", autouse=True)
def setup_db():
    """Create tables before tests and drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_tables(setup_db):
    """Empty every table after each test so counts and names don't leak."""
    yield
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_environment(name, description=None):
    response = client.post("/environments/", json={"name": name, "description": description})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def create_variable(env_name, name, value, **extra):
    response = client.post(
        f"/environments/{env_name}/variables",
        json={"name": name, "value": value, **extra}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
