import os
from pathlib import Path
from uuid import uuid4

_DB_PATH = Path(f"./test_{uuid4().hex}.db")

os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["DEBUG"] = "false"
os.environ["BASE_URL"] = "http://affiliates.test"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.db.session import SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.services.auth_service import bootstrap_admin, register_affiliate  # noqa: E402
from helpers import ADMIN_EMAIL, ADMIN_PASSWORD, AFFILIATE_PASSWORD  # noqa: E402

Base.metadata.create_all(bind=engine)


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    if _DB_PATH.exists():
        _DB_PATH.unlink()


@pytest.fixture(autouse=True)
def _clean_tables():
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_affiliate(db):
    def _make(name="Asha Rao", email=None, password=AFFILIATE_PASSWORD):
        email = email or f"{uuid4().hex[:8]}@example.com"
        return register_affiliate(db, name, email, password)

    return _make


@pytest.fixture
def admin(db):
    return bootstrap_admin(db, ADMIN_EMAIL, ADMIN_PASSWORD)
