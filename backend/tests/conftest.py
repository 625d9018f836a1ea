import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="intercession-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.roles import DEPT_INTERCESSION, ROLE_ADMIN, ROLE_MEMBER
from app.core.security import create_access_token, hash_password
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.user import User


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        s = TestingSession()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


_PASSWORD_HASH = hash_password("secret123")


@pytest.fixture()
def make_user(db):
    counter = {"n": 0}

    def _make(role=ROLE_MEMBER, department=DEPT_INTERCESSION, birthday=None, full_name=None, email=None):
        counter["n"] += 1
        n = counter["n"]
        u = User(
            full_name=full_name or f"Member {n}",
            email=email or f"member{n}@stonecreek.org",
            password_hash=_PASSWORD_HASH,
            role=role,
            department=department,
            birthday=birthday,
        )
        db.add(u)
        db.commit()
        db.refresh(u)
        return u

    return _make


@pytest.fixture()
def admin(make_user):
    return make_user(role=ROLE_ADMIN, full_name="Admin")


def auth_header(user):
    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth():
    return auth_header
