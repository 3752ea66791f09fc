"""
User schemas for the course platform.

Request bodies are validated here before reaching the credential issuer
or the database.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, field_validator
import email_validator


# Local-network addresses are accepted; other reserved names stay rejected.
for _domain in ("local", "localhost"):
    if _domain in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_domain)


class UserRegister(BaseModel):
    """
    Body of ``POST /user``.

    Only ``email`` is required. Any other profile fields sent by the
    frontend (name, photo URL, ...) are stored as-is.
    """

    model_config = ConfigDict(extra="allow")

    email: str

    @field_validator("email")
    @classmethod
    def check_email_syntax(cls, v: str) -> str:
        """Check address syntax only; the address is kept exactly as sent."""
        try:
            email_validator.validate_email(
                v,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True
            )
        except email_validator.EmailNotValidError as e:
            raise ValueError(str(e)) from e
        return v

    def to_document(self) -> Dict[str, Any]:
        """Return the body as a document ready for insertion."""
        return self.model_dump()


class LoginResponse(BaseModel):
    """Response of ``POST /user``; ``status`` and ``message`` only on login."""

    model_config = ConfigDict(json_schema_extra={
        "examples": [
            {"status": "success", "message": "Login success", "token": "<jwt>"},
            {"token": "<jwt>"},
        ]
    })

    token: str
    status: Optional[str] = None
    message: Optional[str] = None
