# tests/conftest.py
import os

# must be set before the app (and its cached settings/engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402

from app.core.database import Base, SessionLocal, engine, init_db  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_schema():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def ticket_payload():
    return {
        "title": "Printer jams daily",
        "description": "The office printer on floor 2 jams every morning before 9am.",
    }
