"""MongoDB connection handling.

The client is owned by the application: it is opened in the lifespan,
kept on ``app.state`` and handed to request handlers through ``get_db``.
"""

import structlog
from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from rental_api.config import Settings

logger = structlog.get_logger(__name__)


def create_client(settings: Settings) -> MongoClient:
    return MongoClient(
        settings.MONGO_URL,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
        tz_aware=True,
    )


def ensure_indexes(db: Database) -> None:
    db["users"].create_index([("email", ASCENDING)], unique=True)
    db["genres"].create_index([("name", ASCENDING)])
    db["rentals"].create_index(
        [
            ("customer._id", ASCENDING),
            ("movie._id", ASCENDING),
            ("dateReturned", ASCENDING),
        ]
    )
    logger.info("Database indexes created/verified", database=db.name)


def get_db(request: Request) -> Database:
    """FastAPI dependency — the database handle owned by the running app."""
    return request.app.state.db
