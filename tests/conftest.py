import os
import tempfile

# --- environment must be ready before the app is imported ---
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="booking-api-logs-"))

import mongomock
import pytest
from fastapi.testclient import TestClient

from booking_api.db import mongo
from booking_api.main import app


# ------------------ database ------------------
@pytest.fixture
def mock_client(monkeypatch):
    client = mongomock.MongoClient()
    monkeypatch.setattr(mongo, "_create_client", lambda settings: client)
    mongo.close_connection()
    yield client
    mongo.close_connection()


# ------------------ client ------------------
@pytest.fixture
def client(mock_client):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def booking_payload():
    return {
        "first_name": "A",
        "last_name": "B",
        "email": "a@b.com",
        "mobile": "1234567890",
        "address": "X",
        "start_date": "2099-01-01",
        "end_date": "2099-01-05",
    }
