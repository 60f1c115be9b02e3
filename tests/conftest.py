import os

# Must be set before careerforge is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENAI_API_KEY"] = ""
os.environ["IDENTITY_JWT_SECRET"] = "test-secret"
os.environ["IDENTITY_JWT_ALGORITHM"] = "HS256"
os.environ["IDENTITY_JWKS_URL"] = ""
os.environ["IDENTITY_ISSUER"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from careerforge.core.config import settings
from careerforge.core.security import create_session_token
from careerforge.db.session import Base, get_db, init_db
from careerforge.main import app
from careerforge.models import User
from careerforge.services import ai_client


# ===== DATABASE =====

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ===== USERS =====

def make_user(db, external_id="user_123", **fields):
    data = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "industry": "Tech",
        "experience": 5,
        "skills": ["Python", "SQL"],
        "bio": "Backend engineer focused on data platforms.",
    }
    data.update(fields)
    user = User(external_id=external_id, **data)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db):
    return make_user(db)


def auth_headers_for(external_id, **claims):
    return {"Authorization": f"Bearer {create_session_token(external_id, **claims)}"}


@pytest.fixture
def auth_headers(user):
    return auth_headers_for(user.external_id)


# ===== AI =====

class FakeAI:
    """Stands in for ai_client.generate_text; replies are consumed in order."""

    def __init__(self):
        self.replies = []
        self.prompts = []

    def __call__(self, prompt, temperature=0.4):
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture(autouse=True)
def no_ai(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "")


@pytest.fixture
def fake_ai(monkeypatch):
    fake = FakeAI()
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
    monkeypatch.setattr(ai_client, "generate_text", fake)
    return fake
