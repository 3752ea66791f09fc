"""
Database configuration and collection access for the course platform.

Sets up the MongoDB client and exposes the user and course collections
as FastAPI dependencies.
"""

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi
import logging

from .config import settings


# Configure logging
logger = logging.getLogger(__name__)


def create_client(url: str | None = None) -> MongoClient:
    """
    Create a MongoDB client.

    The client connects lazily on first use, so building it never blocks
    application startup.

    Args:
        url: Optional connection string, defaults to ``DATABASE_URL``

    Returns:
        MongoClient: Unconnected client
    """
    return MongoClient(
        url or settings.DATABASE_URL,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=settings.DATABASE_TIMEOUT_MS,
        connect=False,
    )


def check_database_connection(client: MongoClient) -> bool:
    """
    Check if database is accessible.

    Returns:
        bool: True if database is accessible, False otherwise
    """
    try:
        client.admin.command("ping")
        logger.info("Successfully connected to MongoDB")
        return True
    except PyMongoError as e:
        logger.error(f"Database connection failed: {e}")
        return False


def get_client(request: Request) -> MongoClient:
    """
    Dependency to get the application's MongoDB client.
    """
    return request.app.state.mongo_client


def get_user_collection(request: Request) -> Collection:
    """
    Dependency to get the users collection.
    """
    client = get_client(request)
    return client[settings.USER_DB_NAME][settings.USER_COLLECTION]


def get_course_collection(request: Request) -> Collection:
    """
    Dependency to get the courses collection.
    """
    client = get_client(request)
    return client[settings.COURSE_DB_NAME][settings.COURSE_COLLECTION]
