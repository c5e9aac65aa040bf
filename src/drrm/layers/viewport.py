"""Map viewport (center + zoom) and the controller that moves it.

Zoom arithmetic follows the Web-Mercator tile pyramid: at zoom z the
world is 256 * 2**z pixels wide.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from drrm.layers.layer import Bounds

TILE_SIZE = 256
MIN_ZOOM = 0
MAX_ZOOM = 19  # OSM standard tiles stop here
_MAX_LAT = 85.0511287798


@dataclass
class Viewport:
    """The map's current center and zoom level."""

    lat: float
    lng: float
    zoom: int

    @property
    def center(self) -> tuple[float, float]:
        return (self.lat, self.lng)

    def to_dict(self) -> dict:
        return {"center": [self.lat, self.lng], "zoom": self.zoom}


def project(lat: float, lng: float, zoom: int) -> tuple[float, float]:
    """Lat/lng to global pixel coordinates at the given zoom."""
    lat = max(-_MAX_LAT, min(_MAX_LAT, lat))
    scale = TILE_SIZE * 2**zoom
    x = (lng + 180.0) / 360.0 * scale
    lat_rad = math.radians(lat)
    y = (1 - math.log(math.tan(lat_rad) + 1 / math.cos(lat_rad)) / math.pi) / 2 * scale
    return x, y


class ViewportController:
    """Pan / zoom / fit operations over a single Viewport.

    Moves are applied directly; there is no easing or animation.
    """

    def __init__(
        self,
        viewport: Viewport,
        width: int = 1024,
        height: int = 768,
        min_zoom: int = MIN_ZOOM,
        max_zoom: int = MAX_ZOOM,
    ) -> None:
        self.viewport = viewport
        self.width = width
        self.height = height
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom

    def _clamp(self, zoom: int) -> int:
        return max(self.min_zoom, min(self.max_zoom, zoom))

    def zoom_in(self, delta: int = 1) -> Viewport:
        self.viewport.zoom = self._clamp(self.viewport.zoom + delta)
        return self.viewport

    def zoom_out(self, delta: int = 1) -> Viewport:
        self.viewport.zoom = self._clamp(self.viewport.zoom - delta)
        return self.viewport

    def fly_to(self, lat: float, lng: float, zoom: int | None = None) -> Viewport:
        self.viewport.lat = lat
        self.viewport.lng = lng
        if zoom is not None:
            self.viewport.zoom = self._clamp(zoom)
        return self.viewport

    def bounds_zoom(self, bounds: Bounds, padding: tuple[int, int] = (50, 50)) -> int:
        """Largest zoom at which the bounds plus padding fit the map size."""
        avail_w = max(1, self.width - 2 * padding[0])
        avail_h = max(1, self.height - 2 * padding[1])
        for zoom in range(self.max_zoom, self.min_zoom - 1, -1):
            x1, y1 = project(bounds.north, bounds.west, zoom)
            x2, y2 = project(bounds.south, bounds.east, zoom)
            if abs(x2 - x1) <= avail_w and abs(y2 - y1) <= avail_h:
                return zoom
        return self.min_zoom

    def fit_bounds(
        self, bounds: Bounds | None, padding: tuple[int, int] = (50, 50)
    ) -> bool:
        """Center on the bounds at the tightest zoom that shows them.

        Returns False (viewport untouched) when the bounds are missing
        or invalid.
        """
        if bounds is None or not bounds.is_valid():
            logger.debug("fit_bounds skipped: invalid bounds")
            return False
        lat, lng = bounds.center
        self.viewport.lat = lat
        self.viewport.lng = lng
        self.viewport.zoom = self.bounds_zoom(bounds, padding)
        return True
