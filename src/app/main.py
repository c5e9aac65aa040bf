"""DRRM Dashboard - municipal disaster risk reduction and management.

Main FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from loguru import logger

from app.config import settings
from app.dashboard import get_dashboard, shutdown_dashboard
from app.database import dispose_engine
from app.routers import admin_router, drive_router, map_router, proxy_router

VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info(f"  {settings.app_name} v{VERSION} - INITIALIZING")
    logger.info("=" * 60)

    if settings.database_dsn:
        logger.info("NEON_DATABASE_URL configured")
    else:
        logger.warning(
            "NEON_DATABASE_URL not set, /api/page and /api/query will return 500 "
            "until configured"
        )

    if not settings.google_drive_api_key:
        logger.warning("GOOGLE_DRIVE_API_KEY not set, galleries will be empty")

    app.state.dashboard = get_dashboard()

    logger.info(f"  {settings.app_name} ONLINE on port {settings.port}")

    yield

    logger.info(f"{settings.app_name} shutting down...")
    shutdown_dashboard()
    await dispose_engine()


# Create FastAPI app
app = FastAPI(
    title="DRRM Dashboard",
    description="Municipal disaster risk reduction and management dashboard",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(proxy_router)
app.include_router(map_router)
app.include_router(drive_router)
app.include_router(admin_router)


@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page pointing at the interactive map."""
    return HTMLResponse(
        content=f"""
        <html>
            <head><title>{settings.app_name}</title></head>
            <body style="font-family: sans-serif;">
                <h1>{settings.app_name} v{VERSION}</h1>
                <p><a href="/api/map">Interactive map</a> &middot; <a href="/docs">API</a></p>
            </body>
        </html>
        """
    )


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
