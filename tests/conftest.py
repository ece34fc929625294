"""Shared fixtures for the booking engine tests."""

import os

# Keep the application's own engine off the filesystem
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import railbook.models  # noqa: F401
from railbook.bookings.booking_service import BookingService
from railbook.database import Base, get_db
from railbook.storage.record_store import RecordStore


class FakeClock:
    """Clock returning a settable timestamp."""

    def __init__(self, now: int = 1_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Session:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db: Session) -> RecordStore:
    return RecordStore(db, id_counter_start=1)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def booking_service(db: Session, store: RecordStore, clock: FakeClock) -> BookingService:
    return BookingService(db, clock=clock, store=store)


@pytest.fixture
def client(engine):
    """API client bound to the per-test database."""
    from railbook.main import app

    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = testing_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
