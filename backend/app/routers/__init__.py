"""
API routers for the course platform.

This module contains all API endpoint routers:
- auth: Registration/login and the credential gate
- users: User profile lookups and updates
- courses: Course CRUD
"""

from fastapi import APIRouter

# Import individual routers
from .auth import router as auth_router
from .users import router as users_router
from .courses import router as courses_router

# Create main API router
api_router = APIRouter()

# Include all routers with their prefixes
api_router.include_router(
    auth_router,
    prefix="/user",
    tags=["authentication"]
)

api_router.include_router(
    users_router,
    prefix="/user",
    tags=["users"]
)

api_router.include_router(
    courses_router,
    prefix="/courses",
    tags=["courses"]
)

# Export all routers
__all__ = [
    "api_router",
    "auth_router",
    "users_router",
    "courses_router"
]
