"""
Shared test configuration.
Every test gets its own in-memory SQLite database, injected into the
application through `create_app(engine=...)`.
"""

import logging
import os

# Must be set before product_service reads its settings at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_CONNECT_RETRY_DELAY_SECONDS", "0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from product_service.db import Base, build_session_factory
from product_service.main import create_app

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("fastapi").setLevel(logging.WARNING)


@pytest.fixture
def engine():
    """
    A fresh in-memory database. StaticPool keeps a single connection so the
    TestClient worker threads and the test see the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    """
    Provides a TestClient for making HTTP requests to the FastAPI application.
    The TestClient runs the app's startup events.
    """
    with TestClient(create_app(engine)) as test_client:
        yield test_client


@pytest.fixture
def sample_product():
    return {
        "name": "Sample Product",
        "description": "This is a sample product",
        "price": 99.99,
    }
