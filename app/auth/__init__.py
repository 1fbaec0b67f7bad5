# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Shared-password check for the admin panel.
#
# Usage:
#   from app.auth import require_admin
#
#   @router.post("", dependencies=[Depends(require_admin)])
#   def admin_only(): ...
# =============================================================================

from app.auth.dependencies import ADMIN_PASSWORD_HEADER, check_password, require_admin
from app.auth.models import AuthResult, PasswordRequest

__all__ = [
    "ADMIN_PASSWORD_HEADER",
    "check_password",
    "require_admin",
    "AuthResult",
    "PasswordRequest",
]
