import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("APP_ENV", "test")

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from models.handover import HandoverLog
from models.users import User
from utils.hashing import get_password_hash

PASSWORD = "correct horse"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, follow_redirects=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make(username, role="operator", password=PASSWORD, first_name=None, last_name=None):
        user = User(
            username=username,
            first_name=first_name,
            last_name=last_name,
            password=get_password_hash(password),
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make


@pytest.fixture
def make_log(db_session):
    def _make(user, created_at=None, **fields):
        if isinstance(fields.get("date"), str):
            fields["date"] = date.fromisoformat(fields["date"])
        log = HandoverLog(
            submitted_by_user_id=user.id,
            created_at=created_at or datetime(2024, 1, 1, 6, 0, 0),
            **fields,
        )
        db_session.add(log)
        db_session.commit()
        db_session.refresh(log)
        return log
    return _make


@pytest.fixture
def login(client):
    def _login(username, password=PASSWORD):
        return client.post("/login", data={"username": username, "password": password})
    return _login
