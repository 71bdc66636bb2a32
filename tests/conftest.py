"""Pytest configuration and fixtures."""

import os

# Point the app at SQLite before anything imports app.core.config
os.environ["LOCAL_DATABASE_URL"] = "sqlite://"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("RENDER", None)
os.environ.pop("DOCKER_ENV", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import Base, get_db
from app.main import app
from app.models.dataset import DistrictData

# (district_code, district_name, fin_year, month, persondays); ids follow list order
SAMPLE_ROWS = [
    ("601", "Ariyalur", "2023-2024", "Apr", 100),
    ("602", "Chennai", "2023-2024", "Apr", 50),
    ("601", "Ariyalur", "2023-2024", "May", 180),
    ("603", "Coimbatore", "2023-2024", "Apr", 70),
    ("602", "Chennai", "2023-2024", "May", 90),
    ("601", "Ariyalur", "2023-2024", "Jun", 260),
]


@pytest.fixture
def engine():
    """In-memory SQLite shared across threads, so TestClient sees the same data."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(session):
    for code, name, fin_year, month, persondays in SAMPLE_ROWS:
        session.add(DistrictData(
            district_code=code,
            district_name=name,
            fin_year=fin_year,
            month=month,
            persondays_of_central_liability_so_far=persondays,
        ))
    session.commit()
    return session


@pytest.fixture
def client(engine):
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
