# =============================================================================
# app/auth/dependencies.py - Admin Password Check
# =============================================================================
# The whole trust model is one shared secret (ADMIN_PASSWORD):
# - check_password() backs POST /api/auth, which the admin UI calls before
#   showing itself
# - require_admin() guards the admin routes, but only when
#   ADMIN_AUTH_REQUIRED is enabled; by default those routes stay open
#
# Usage:
#   @router.delete("/{app_id}", dependencies=[Depends(require_admin)])
# =============================================================================

import logging
import secrets
from typing import Annotated, Any, Optional

from fastapi import Header

from app.config import Settings
from app.dependencies import SettingsDep
from app.exceptions import InvalidPasswordError

logger = logging.getLogger(__name__)

ADMIN_PASSWORD_HEADER = "x-admin-password"


def check_password(settings: Settings, password: Any) -> bool:
    """
    Compare a submitted password with the configured secret.

    Args:
        settings: Settings holding ADMIN_PASSWORD
        password: Submitted value, None if absent; non-strings never match

    Returns:
        True only on an exact match
    """
    if not isinstance(password, str) or not password:
        return False
    return secrets.compare_digest(
        password.encode("utf-8"),
        settings.ADMIN_PASSWORD.encode("utf-8"),
    )


async def require_admin(
    settings: SettingsDep,
    x_admin_password: Annotated[Optional[str], Header(alias=ADMIN_PASSWORD_HEADER)] = None,
) -> None:
    """
    Reject admin requests without the shared secret.

    A no-op unless ADMIN_AUTH_REQUIRED is set.

    Raises:
        InvalidPasswordError: Header missing or wrong (401)
    """
    if not settings.ADMIN_AUTH_REQUIRED:
        return

    if not check_password(settings, x_admin_password):
        logger.warning("Rejected admin request with missing or invalid password")
        raise InvalidPasswordError()
