# =============================================================================
# app/routers/pages.py - Frontend Entry Points
# =============================================================================
# GET /       -> FRONTEND_DIR/index.html
# GET /admin  -> FRONTEND_DIR/admin.html
#
# The frontend itself is built and shipped separately; other assets under
# FRONTEND_DIR are served by the StaticFiles mount in main.py.
# =============================================================================

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.dependencies import SettingsDep
from app.exceptions import PageNotFoundError

router = APIRouter()


def _page(frontend_dir: str, filename: str) -> FileResponse:
    path = Path(frontend_dir) / filename
    if not path.is_file():
        raise PageNotFoundError(filename)
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def index(settings: SettingsDep):
    return _page(settings.FRONTEND_DIR, "index.html")


@router.get("/admin", include_in_schema=False)
async def admin(settings: SettingsDep):
    return _page(settings.FRONTEND_DIR, "admin.html")
