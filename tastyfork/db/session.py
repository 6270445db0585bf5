"""
db/session.py – MongoClient factory + database helper.

One MongoClient per URI, cached; the driver keeps its own connection pool.
MongoClient connects lazily, so creating it never blocks startup.
"""
import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)


# ── Client cache (1 client / URI) ────────────────────────────────────────────

_clients: dict[str, MongoClient] = {}


def get_client(uri: str, timeout_ms: int = 5000) -> MongoClient:
    if uri not in _clients:
        _clients[uri] = MongoClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=timeout_ms,
            tz_aware=True,
        )
    return _clients[uri]


def get_database(client: MongoClient, name: str) -> Database:
    return client[name]


def ping(db: Database) -> bool:
    """True if the server answers `ping`. Failures are logged, never raised."""
    try:
        db.client.admin.command("ping")
        return True
    except Exception as e:
        logger.error(f"MongoDB ping failed: {e}")
        return False


def close_all() -> None:
    for client in _clients.values():
        client.close()
    _clients.clear()
