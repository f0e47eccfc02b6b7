"""Pytest configuration for tests."""

import os

# musi byc przed importem app.* (settings czytane przy imporcie)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("KV_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.api.dependencies import get_kv_store
from app.api.routers.payments import get_checkout_service
from app.data.database import Base, get_db
from app.data.models import ProductModel, ReviewModel  # noqa: F401
from app.repos.kv_store import InMemoryKeyValueStore
from app.services.checkout_service import CheckoutService

from tests.fakes import FakeAuthClient, FakeGateway


@pytest.fixture
def engine():
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
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def checkout_service(gateway):
    return CheckoutService(gateway_factory=lambda: gateway, auth_client=FakeAuthClient())


@pytest.fixture
def app(db_session, kv_store, checkout_service):
    app = create_app()
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_kv_store] = lambda: kv_store
    app.dependency_overrides[get_checkout_service] = lambda: checkout_service
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
