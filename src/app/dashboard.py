"""Process-wide dashboard state: the map, its layers, the admin flag.

Created lazily on first use (or at startup) from settings; routers get
it through the ``get_dashboard`` dependency.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from app.config import Settings, settings
from drrm.content import LoginSession, PageContentLoader
from drrm.gallery import DriveClient, GalleryCatalogue
from drrm.layers import FitPolicy, LayerRegistry, MapHost, UploadPipeline


class Dashboard:
    """Everything the interactive map and admin screens share."""

    def __init__(self, config: Settings) -> None:
        self.map_host = MapHost(
            center=(config.map_center_lat, config.map_center_lng),
            zoom=config.map_zoom,
            width=config.map_width,
            height=config.map_height,
        )
        self.registry = LayerRegistry(self.map_host)
        self.uploads = UploadPipeline(
            self.registry,
            allowed_extensions=config.upload_extensions,
            fit_policy=FitPolicy(config.upload_fit_policy),
        )
        self.session = LoginSession()
        self.pages = PageContentLoader(config.page_api_url)
        self.drive = DriveClient(config.google_drive_api_key)
        self.galleries = GalleryCatalogue(config.gallery_folders, config.gallery_titles)

    def shutdown(self) -> None:
        self.registry.clear()
        self.map_host.teardown()


_dashboard: Optional[Dashboard] = None


def get_dashboard() -> Dashboard:
    """Get or create the dashboard singleton."""
    global _dashboard
    if _dashboard is None:
        _dashboard = Dashboard(settings)
        logger.info(
            f"Dashboard ready: map at {settings.map_center_lat:.4f}, "
            f"{settings.map_center_lng:.4f} z{settings.map_zoom}, "
            f"{len(_dashboard.galleries.list())} gallery folders"
        )
    return _dashboard


def shutdown_dashboard() -> None:
    global _dashboard
    if _dashboard is not None:
        _dashboard.shutdown()
        _dashboard = None
