"""Login screen and admin panel.

The login flag is a plain boolean: any non-empty password opens the
admin panel and nothing is checked server-side.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.dashboard import Dashboard, get_dashboard
from drrm.content import LoginError

router = APIRouter(prefix="/api", tags=["admin"])


class LoginRequest(BaseModel):
    password: str = ""


@router.get("/login")
async def login_page(dash: Dashboard = Depends(get_dashboard)):
    """Login screen text (database, error placeholder or bundled fallback)."""
    content = await dash.pages.load("login")
    payload = content.to_dict()
    payload["logged_in"] = dash.session.is_logged_in
    return payload


@router.post("/login")
async def login(body: LoginRequest, dash: Dashboard = Depends(get_dashboard)):
    try:
        dash.session.login(body.password)
    except LoginError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"logged_in": True, "next": "admin"}


@router.post("/logout")
async def logout(dash: Dashboard = Depends(get_dashboard)):
    dash.session.logout()
    return {"logged_in": False}


@router.get("/admin")
async def admin_panel(dash: Dashboard = Depends(get_dashboard)):
    if not dash.session.is_logged_in:
        raise HTTPException(
            status_code=403,
            detail="Admin Access Required: you must log in to view the admin panel.",
        )
    content = await dash.pages.load("admin")
    return content.to_dict()
