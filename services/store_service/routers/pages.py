"""Admin page routes. Browser navigation without a session goes to the login page."""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, RedirectResponse
from libs.auth.dependencies import get_admin_from_request
from libs.auth.models import AdminIdentity
from libs.common.config import get_settings

router = APIRouter(tags=["pages"], include_in_schema=False)

LOGIN_PATH = "/admin/login"


def _frontend_file(base: str, *parts: str) -> FileResponse:
    """Serve a file that resolves inside FRONTEND_DIR/<base>, else 404."""
    root = (Path(get_settings().FRONTEND_DIR) / base).resolve()
    target = root.joinpath(*parts).resolve()
    if not target.is_relative_to(root) or not target.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(target)


def _login_redirect() -> RedirectResponse:
    return RedirectResponse(LOGIN_PATH, status_code=302)


@router.get(LOGIN_PATH)
async def login_page():
    return _frontend_file("admin/login", "index.html")


@router.get("/admin.html")
async def admin_dashboard(
    admin: Optional[AdminIdentity] = Depends(get_admin_from_request),
):
    if admin is None:
        return _login_redirect()
    return _frontend_file(".", "admin.html")


@router.get("/admin/{path:path}")
async def admin_assets(
    path: str,
    admin: Optional[AdminIdentity] = Depends(get_admin_from_request),
):
    parts = Path(path).parts or ("index.html",)
    if parts[0] == "login":
        return _frontend_file("admin/login", *(parts[1:] or ("index.html",)))
    if admin is None:
        return _login_redirect()
    return _frontend_file("admin", *parts)
