import threading

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from booking_api.core.config import Settings, load_settings
from booking_api.core.logging_config import get_logger

logger = get_logger()

_settings = None
_client = None
_collection = None
_lock = threading.Lock()


class DatabaseNotReady(RuntimeError):
    """Raised when no connection to MongoDB could be established."""


def configure(settings: Settings):
    global _settings
    _settings = settings


def _create_client(settings: Settings) -> MongoClient:
    options = {
        "server_api": ServerApi("1", strict=True, deprecation_errors=True),
        "serverSelectionTimeoutMS": settings.mongo_timeout_ms,
    }
    if settings.mongo_tls is not None:
        options["tls"] = settings.mongo_tls

    client = MongoClient(settings.mongo_uri, **options)
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    return client


def get_bookings_collection() -> Collection:
    """
    Return the shared bookings collection, connecting on first use.
    A failed attempt is not cached, the next caller tries again.
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    with _lock:
        if _collection is not None:
            return _collection

        settings = _settings or load_settings()

        try:
            client = _create_client(settings)
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseNotReady("Database not ready") from e

        _client = client
        _collection = client[settings.mongo_db_name][settings.mongo_collection]
        logger.info(
            f"Connected to MongoDB | db={settings.mongo_db_name} "
            f"| collection={settings.mongo_collection}"
        )

    return _collection


def close_connection():
    global _client, _collection

    with _lock:
        if _client is None:
            return
        _client.close()
        _client = None
        _collection = None
        logger.info("MongoDB connection closed")
