"""
Core module for the course platform backend.

This module contains core functionality including:
- Configuration management
- Database connections
- Security utilities (JWT issuance and verification)
"""

from .config import settings
from .database import (
    create_client,
    check_database_connection,
    get_user_collection,
    get_course_collection
)
from .security import (
    Authorized,
    Unauthorized,
    authenticate,
    create_access_token,
    verify_token
)

__all__ = [
    "settings",
    "create_client",
    "check_database_connection",
    "get_user_collection",
    "get_course_collection",
    "Authorized",
    "Unauthorized",
    "authenticate",
    "create_access_token",
    "verify_token"
]
