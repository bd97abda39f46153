"""
Shared fixtures: a fresh in-memory SQLite database per test
"""
import os

# Must be set before craftlib is imported so the module engine never
# touches a file on disk
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from craftlib.db.seed import seed_example_data
from craftlib.db.session import create_db_engine, get_db, init_db


@pytest.fixture
def engine():
    """In-memory engine with foreign keys enforced, tables created"""
    test_engine = create_db_engine("sqlite:///:memory:", poolclass=StaticPool)
    init_db(bind=test_engine)
    try:
        yield test_engine
    finally:
        test_engine.dispose()


@pytest.fixture
def db_session(engine):
    """Empty database"""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seeded_db(db_session):
    """Database holding the sample projects, stash and sessions"""
    seed_example_data(db_session)
    return db_session


@pytest.fixture
def client(seeded_db):
    """Create a test client with database override"""
    from craftlib.main import app

    def override_get_db():
        try:
            yield seeded_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
