# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for the admin password check.
# =============================================================================

from typing import Any, Optional

from pydantic import BaseModel


class PasswordRequest(BaseModel):
    """
    Body of POST /api/auth.

    ``password`` is left untyped: a number or list is simply a wrong password.
    """
    password: Any = None


class AuthResult(BaseModel):
    """
    Outcome of a password check.

    ``message`` is only set on failure.
    """
    success: bool
    message: Optional[str] = None
