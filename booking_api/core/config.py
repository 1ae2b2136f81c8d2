from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


# ---------------------- DATA CLASSES ----------------------

@dataclass(frozen=True)
class Settings:
    mongo_uri: str
    port: int = 8080
    host: str = "0.0.0.0"
    mongo_db_name: str = "Resortdb"
    mongo_collection: str = "bookings"
    mongo_tls: bool | None = None  # None lets the driver decide from the URI
    mongo_timeout_ms: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


# ---------------------- LOADING ----------------------

def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def _bool_env(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Read settings from the environment. MONGO_URI is mandatory."""
    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise RuntimeError("MONGO_URI is not defined in the environment variables")

    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        mongo_uri=mongo_uri,
        port=_int_env("PORT", 8080),
        host=os.getenv("HOST", "0.0.0.0"),
        mongo_db_name=os.getenv("MONGO_DB_NAME", "Resortdb"),
        mongo_collection=os.getenv("MONGO_COLLECTION", "bookings"),
        mongo_tls=_bool_env("MONGO_TLS"),
        mongo_timeout_ms=_int_env("MONGO_TIMEOUT_MS", 5000),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
