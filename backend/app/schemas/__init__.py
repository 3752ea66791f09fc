"""
Request and response schemas for the course platform.
"""

from .user import UserRegister, LoginResponse

__all__ = ["UserRegister", "LoginResponse"]
