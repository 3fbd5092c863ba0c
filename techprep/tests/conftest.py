"""
Pytest fixtures for TechPrep API tests.
Uses in-memory SQLite, mocks Redis, points file stores at a temp dir.
"""
import os
import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from jose import jwt

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["REDIS_URL"] = ""

from techprep.app.db.base import Base
from techprep.main import app
from techprep.app.core.config import settings
from techprep.app.core.dependencies import get_db
from techprep.app.services import local_resume_store
from techprep.app.tasks.seed import seed_sample_questions

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import techprep.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal
# main.py imports engine directly; patch so startup uses our engine
import techprep.main as main_module
main_module.engine = engine

TEST_JWT_SECRET = "test-supabase-jwt-secret"


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient with empty DB."""
    return TestClient(app)


@pytest.fixture
def seeded_questions(db_session):
    """Sample question bank (JavaScript, React, Algorithms)."""
    seed_sample_questions(db_session)
    from techprep.app.models.technical_question import TechnicalQuestion
    return {q.tech_stack: q for q in db_session.query(TechnicalQuestion).all()}


@pytest.fixture
def auth_headers(monkeypatch):
    """Bearer token shaped like a Supabase access token for user 'user-123'."""
    monkeypatch.setattr(settings, "supabase_jwt_secret", TEST_JWT_SECRET)
    token = jwt.encode({"sub": "user-123", "aud": "authenticated"}, TEST_JWT_SECRET, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """JSON file store and upload dir under tmp_path; empty key-value store."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path / "data"))
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))
    local_resume_store.clear_all_resumes()
    yield tmp_path
    local_resume_store.clear_all_resumes()


@pytest.fixture(autouse=True)
def mock_redis():
    """Mock Redis cache: get returns None (cache miss), set/delete no-op. Skip connect."""
    with patch("techprep.app.utils.cache.get", new_callable=AsyncMock, return_value=None), \
         patch("techprep.app.utils.cache.set", new_callable=AsyncMock), \
         patch("techprep.app.utils.cache.delete", new_callable=AsyncMock), \
         patch("techprep.app.utils.cache.connect", new_callable=AsyncMock), \
         patch("techprep.app.utils.cache.close", new_callable=AsyncMock):
        yield
