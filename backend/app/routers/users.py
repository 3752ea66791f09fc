"""
Users router for the course platform.

Profile lookups by storage id or email, and profile updates by email.
Lookups that find nothing return ``null``.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends
from pymongo.collection import Collection

from app.core.database import get_user_collection
from app.models.document import (
    parse_object_id,
    serialize_document,
    serialize_update_result,
    without_identifier
)


router = APIRouter()


@router.get("/get/{user_id}")
def get_user_by_id(
    user_id: str,
    users: Collection = Depends(get_user_collection)
) -> Optional[Dict[str, Any]]:
    """
    Get a user by storage id.
    """
    user = users.find_one({"_id": parse_object_id(user_id)})
    return serialize_document(user)


@router.get("/{email}")
def get_user_by_email(
    email: str,
    users: Collection = Depends(get_user_collection)
) -> Optional[Dict[str, Any]]:
    """
    Get a user by email.
    """
    return serialize_document(users.find_one({"email": email}))


@router.patch("/{email}")
def update_user(
    email: str,
    user_data: Dict[str, Any] = Body(...),
    users: Collection = Depends(get_user_collection)
) -> Dict[str, Any]:
    """
    Merge fields into the user with this email, creating it if absent.
    """
    result = users.update_one(
        {"email": email},
        {"$set": without_identifier(user_data)},
        upsert=True
    )
    return serialize_update_result(result)
