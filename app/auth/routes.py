# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# POST /api/auth - check the admin password.
#
# No session or token is issued; the admin UI only uses the answer to decide
# whether to show itself.
# =============================================================================

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.auth.dependencies import check_password
from app.auth.models import AuthResult, PasswordRequest
from app.dependencies import SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AuthResult,
    response_model_exclude_none=True,
    responses={401: {"model": AuthResult, "description": "Invalid password"}},
)
async def verify_password(settings: SettingsDep, request: PasswordRequest | None = None):
    """
    Check the admin password.

    Returns:
        {"success": true} on a match

    Raises:
        401: {"success": false, "message": "Invalid password"}
    """
    password = request.password if request else None
    if check_password(settings, password):
        return AuthResult(success=True)

    logger.warning("Admin login failed")
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=AuthResult(success=False, message="Invalid password").model_dump(),
    )
