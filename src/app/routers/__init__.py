"""API routers for the DRRM dashboard."""

from app.routers.admin import router as admin_router
from app.routers.drive import router as drive_router
from app.routers.map import router as map_router
from app.routers.proxy import router as proxy_router

__all__ = ["admin_router", "drive_router", "map_router", "proxy_router"]
