import pytest

from booking_api.core.config import load_settings


def test_mongo_uri_required(monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)

    with pytest.raises(RuntimeError, match="MONGO_URI"):
        load_settings()


def test_defaults(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    for name in ("PORT", "HOST", "MONGO_DB_NAME", "MONGO_COLLECTION",
                 "MONGO_TLS", "MONGO_TIMEOUT_MS", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.mongo_uri == "mongodb://db:27017"
    assert settings.port == 8080
    assert settings.mongo_db_name == "Resortdb"
    assert settings.mongo_collection == "bookings"
    assert settings.mongo_tls is None
    assert settings.cors_origins == ["*"]


def test_overrides(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("MONGO_TLS", "true")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = load_settings()

    assert settings.port == 9000
    assert settings.mongo_tls is True
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_bad_port(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(RuntimeError, match="PORT"):
        load_settings()
