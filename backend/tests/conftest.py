from __future__ import annotations

import os
from typing import Dict, Generator

import mongomock
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.core.config import settings  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture()
def mongo_client() -> Generator[mongomock.MongoClient, None, None]:
    """Provide an isolated in-memory MongoDB per test."""

    client = mongomock.MongoClient()
    try:
        yield client
    finally:
        client.close()


@pytest.fixture()
def user_collection(mongo_client):
    return mongo_client[settings.USER_DB_NAME][settings.USER_COLLECTION]


@pytest.fixture()
def course_collection(mongo_client):
    return mongo_client[settings.COURSE_DB_NAME][settings.COURSE_COLLECTION]


@pytest.fixture()
def app(mongo_client):
    return create_app(mongo_client=mongo_client)


@pytest.fixture()
def client(app) -> TestClient:
    # Not entered as a context manager, so the startup ping never runs.
    return TestClient(app)


@pytest.fixture()
def auth_headers() -> Dict[str, str]:
    token = create_access_token({"email": "instructor@example.com"})
    return {"Authorization": f"Bearer {token}"}


__all__ = ["mongo_client", "client", "auth_headers"]
