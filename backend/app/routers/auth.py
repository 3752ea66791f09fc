"""
Authentication router for the course platform.

Handles registration/login (credential issuance) and provides the gating
dependency used by protected course endpoints.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Header, HTTPException, status
from pymongo.collection import Collection
import logging

from app.core.database import get_user_collection
from app.core.security import Unauthorized, authenticate, create_access_token
from app.schemas.user import LoginResponse, UserRegister


logger = logging.getLogger(__name__)

router = APIRouter()


# Dependencies
def get_current_email(
    authorization: Optional[str] = Header(default=None)
) -> str:
    """
    Get the authenticated email from the ``Authorization: Bearer`` header.

    Rejects the request with 401 before the handler runs when the credential
    is missing, malformed, expired, signed with another key, or has no email.
    """
    result = authenticate(authorization)
    if isinstance(result, Unauthorized):
        logger.info(f"Rejected credential: {result.reason}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You are not authorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result.email


# Endpoints
@router.post("", response_model=LoginResponse, response_model_exclude_none=True)
def register_or_login(
    user_data: UserRegister,
    users: Collection = Depends(get_user_collection)
) -> Dict[str, Any]:
    """
    Register a new user, or log in an existing one.

    Either way a fresh token is returned. An existing user's record is not
    modified on login.
    """
    user = user_data.to_document()
    token = create_access_token(user)

    existing_user = users.find_one({"email": user["email"]})
    if existing_user is not None:
        logger.info(f"Login for existing user {user['email']}")
        return {
            "status": "success",
            "message": "Login success",
            "token": token,
        }

    users.insert_one(user)
    logger.info(f"Registered new user {user['email']}")
    return {"token": token}
